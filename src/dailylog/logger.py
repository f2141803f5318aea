"""统一的日志写入器。

``Logger`` 持有全局等级上限、inline 标志与两个 sink（控制台、按日期轮转的文件）。
渲染后的文本通过 dailylog 私有的 loguru logger（与全局 ``loguru.logger``
互不影响）以 raw 方式分发给本实例注册的 handler：
loguru 负责同一 handler 的写入串行化，并在 sink 出错时拦截异常，
不会把错误抛给调用方。
"""

from __future__ import annotations

import copy
import itertools
import os
import sys
from datetime import datetime
from typing import Any, Callable, Optional, TextIO

from loguru import logger as _global_logger

from .callsite import CallerInfo, caller_info
from .errors import LogFileError
from .formatter import format_console, format_file
from .levels import Level, parse_level
from .sinks.console import DEFAULT_WIDTH, ConsoleSink
from .sinks.file import DailyFileSink

DEFAULT_LOG_DIR = "./log"

# extra 中标记 handler 归属的键
SINK_KEY = "dailylog_sink"

# 从内部辅助函数到公开入口的栈深：公开方法 -> _console/_file -> caller_info
_ENTRY_DEPTH = 1

_ids = itertools.count(1)


def _private_logger():
    """复制一个拥有独立 handler 集合的 loguru logger。

    宿主应用在全局 logger 上添加的 handler 收不到 dailylog 的记录，
    dailylog 也不会改动全局 logger 的 handler。
    """
    # 标准流不可深拷贝，复制出的 handler 直接引用原对象，随后即被移除
    memo = {
        id(stream): stream
        for stream in (sys.stdout, sys.stderr, sys.__stdout__, sys.__stderr__)
        if stream is not None
    }
    try:
        private = copy.deepcopy(_global_logger, memo)
    except (TypeError, copy.Error):
        # 宿主已添加了不可复制的 sink（例如打开的文件）：
        # 按 loguru 自身创建全局 logger 的方式新建一个空的 logger
        from loguru._logger import Core

        return type(_global_logger)(
            core=Core(),
            exception=None,
            depth=0,
            record=False,
            lazy=False,
            colors=False,
            raw=False,
            capture=True,
            patchers=[],
            extra={},
        )
    private.remove()
    return private


_logger = _private_logger()


def _owned_by(key: str) -> Callable[[dict], bool]:
    def _filter(record: dict) -> bool:
        return record["extra"].get(SINK_KEY) == key

    return _filter


class Logger:
    """带等级上限的彩色控制台 + 按日期轮转文件的日志器。

    所有调用都在调用方线程上同步执行；``stacklevel`` 与标准库 logging
    的含义一致，封装函数可以传入更大的值把调用点指向自己的调用方。

    每个实例在私有 loguru logger 上注册两个 handler，直到 ``close()``
    （或退出 ``with`` 块）才移除；短生命周期的实例应使用上下文管理器。
    """

    def __init__(
        self,
        level: Level | str | int = Level.DEBUG,
        *,
        log_dir: str | os.PathLike[str] = DEFAULT_LOG_DIR,
        stream: Optional[TextIO] = None,
        width: Optional[Callable[[], int]] = None,
        fallback_width: int = DEFAULT_WIDTH,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.global_level = parse_level(level)
        self.inline = False
        self._clock = clock

        self.console_sink = ConsoleSink(
            stream, width=width, fallback_width=fallback_width
        )
        self.file_sink = DailyFileSink(
            log_dir, clock=clock, on_error=self._report_file_error
        )

        ident = next(_ids)
        console_key = f"{ident}:console"
        file_key = f"{ident}:file"
        self._console_core = _logger.bind(**{SINK_KEY: console_key}).opt(raw=True)
        self._file_core = _logger.bind(**{SINK_KEY: file_key}).opt(raw=True)
        self._handler_ids = [
            _logger.add(
                self.console_sink,
                level=0,
                format="{message}",
                filter=_owned_by(console_key),
                colorize=False,
                catch=True,
            ),
            _logger.add(
                self.file_sink,
                level=0,
                format="{message}",
                filter=_owned_by(file_key),
                colorize=False,
                catch=True,
            ),
        ]

    # 等级 ----------------------------------------------------------------

    def set_global_level(self, level: Level | str | int) -> None:
        """设置控制台输出的等级上限。"""
        self.global_level = parse_level(level)

    def enabled(self, level: Level | str | int) -> bool:
        return self.global_level >= parse_level(level)

    # 控制台 --------------------------------------------------------------

    def get_text(
        self,
        level: Level | str | int,
        message: str,
        *args: Any,
        stacklevel: int = 1,
    ) -> str:
        """返回格式化后的控制台文本而不输出；被等级上限拦截时返回空串。"""
        level = parse_level(level)
        if not self.enabled(level):
            return ""
        caller = caller_info(stacklevel)
        return format_console(level, message, args, caller, self._clock())

    def log_to_console(
        self,
        level: Level | str | int,
        message: str,
        *args: Any,
        stacklevel: int = 1,
        caller: Optional[CallerInfo] = None,
    ) -> None:
        self._console(level, message, args, stacklevel, caller)

    def fatal(self, message: str, *args: Any, stacklevel: int = 1) -> None:
        self._console(Level.FATAL, message, args, stacklevel)

    def error(self, message: str, *args: Any, stacklevel: int = 1) -> None:
        self._console(Level.ERROR, message, args, stacklevel)

    def warning(self, message: str, *args: Any, stacklevel: int = 1) -> None:
        self._console(Level.WARNING, message, args, stacklevel)

    def info(self, message: str, *args: Any, stacklevel: int = 1) -> None:
        self._console(Level.INFO, message, args, stacklevel)

    def text(self, message: str, *args: Any, stacklevel: int = 1) -> None:
        self._console(Level.TEXT, message, args, stacklevel)

    def debug(self, message: str, *args: Any, stacklevel: int = 1) -> None:
        self._console(Level.DEBUG, message, args, stacklevel)

    def start_inline(self) -> None:
        """进入 inline 模式：之后的控制台输出原地重绘当前行。"""
        self.inline = True

    def stop_inline(self) -> None:
        """退出 inline 模式并输出一个换行，让光标回到新行。"""
        self.inline = False
        self._console_core.log(Level.TEXT.loguru_name, "\n")

    def _console(
        self,
        level: Level | str | int,
        message: str,
        args: tuple,
        stacklevel: int,
        caller: Optional[CallerInfo] = None,
    ) -> None:
        level = parse_level(level)
        # 等级拦截先于任何格式化工作
        if not self.enabled(level):
            return
        if caller is None:
            caller = caller_info(stacklevel + _ENTRY_DEPTH)
        line = format_console(level, message, args, caller, self._clock())
        payload = self.console_sink.frame(line, inline=self.inline)
        self._console_core.log(level.loguru_name, payload)

    # 文件 ----------------------------------------------------------------

    def log_to_file(self, message: str, *args: Any, stacklevel: int = 1) -> None:
        """追加一行到当天的日志文件；失败时只在控制台报告 FATAL，不抛出异常。"""
        self._file(message, args, stacklevel)

    def _file(self, message: str, args: tuple, stacklevel: int) -> None:
        caller = caller_info(stacklevel + _ENTRY_DEPTH)
        line = format_file(message, args, caller, self._clock())
        self._file_core.log(Level.INFO.loguru_name, line)

    def _report_file_error(self, exc: LogFileError) -> None:
        # 调用点指向出错的文件 sink
        self._console(Level.FATAL, str(exc), (), 1, caller=caller_info(1))

    # 生命周期 ------------------------------------------------------------

    def close(self) -> None:
        """移除本实例的 loguru handler 并关闭日志文件。"""
        for handler_id in self._handler_ids:
            try:
                _logger.remove(handler_id)
            except ValueError:
                # handler 已被移除
                pass
        self._handler_ids = []
        self.file_sink.close()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"<Logger level={self.global_level.name} inline={self.inline} "
            f"dir={self.file_sink.directory}>"
        )


__all__ = ["Logger", "DEFAULT_LOG_DIR"]
