"""调用点（函数名 + 行号）解析。

``caller_info(depth)`` 从调用它的函数向上跳过 ``depth`` 层栈帧；
各公开入口的深度是固定常量，由测试保证解析到真实调用点。
"""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class CallerInfo:
    module: str
    function: str
    line: int
    filename: str = ""

    @property
    def qualified(self) -> str:
        return f"{self.module}.{self.function}"


UNKNOWN_CALLER = CallerInfo(module="?", function="?", line=0)


def caller_info(depth: int = 1) -> CallerInfo:
    """返回调用者之上第 ``depth`` 层栈帧的位置信息。

    ``depth=1`` 表示「调用 caller_info 的函数」的调用者。
    栈深不足时返回 ``UNKNOWN_CALLER``。
    """
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return UNKNOWN_CALLER

    code = frame.f_code
    return CallerInfo(
        module=frame.f_globals.get("__name__", "?"),
        # co_qualname 仅 3.11+ 可用
        function=getattr(code, "co_qualname", code.co_name),
        line=frame.f_lineno,
        filename=code.co_filename,
    )


__all__ = ["CallerInfo", "UNKNOWN_CALLER", "caller_info"]
