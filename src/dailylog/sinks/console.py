"""控制台 sink。

支持普通模式（整行输出）与 inline 模式（先用空格擦除当前终端行再重绘，
用于进度条一类的原地刷新）。
"""

from __future__ import annotations

import os
import sys
from typing import Callable, Optional, TextIO

from ..errors import TerminalSizeError

DEFAULT_WIDTH = 80


def query_terminal_width(fd: Optional[int] = None) -> int:
    """查询控制终端的列数。

    查询失败时抛出 ``TerminalSizeError``，由调用方决定回退策略。
    """
    try:
        if fd is None:
            stream = sys.__stdout__
            if stream is None:
                raise TerminalSizeError("no controlling terminal")
            fd = stream.fileno()
        return os.get_terminal_size(fd).columns
    except TerminalSizeError:
        raise
    except (OSError, ValueError, AttributeError) as exc:
        raise TerminalSizeError(f"cannot query terminal size: {exc}") from exc


class ConsoleSink:
    """写入标准输出（或注入的流）的 sink。

    流在每次写入时才解析，因此替换 ``sys.stdout`` 之后依然生效。
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        *,
        width: Optional[Callable[[], int]] = None,
        fallback_width: int = DEFAULT_WIDTH,
    ) -> None:
        self._stream = stream
        self._width = width or query_terminal_width
        self.fallback_width = fallback_width

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def terminal_width(self) -> int:
        """当前终端列数；查询失败时退回 ``fallback_width``。"""
        try:
            columns = self._width()
        except TerminalSizeError:
            return self.fallback_width
        # 非终端环境下可能得到 0 列
        return columns if columns > 0 else self.fallback_width

    def frame(self, line: str, *, inline: bool) -> str:
        """为一行日志加上模式相关的前后缀。

        inline 模式：``\\r`` + 覆盖整行宽度的空格 + ``\\r`` + 日志行，不加换行。
        """
        if not inline:
            return line + "\n"
        # 空格的显示宽度恒为 1，列数即所需空格数
        blank = " " * self.terminal_width()
        return f"\r{blank}\r{line}"

    def write(self, message: str) -> None:
        self.stream.write(message)

    def flush(self) -> None:
        self.stream.flush()


__all__ = ["ConsoleSink", "DEFAULT_WIDTH", "query_terminal_width"]
