"""把标准库 logging 的记录转发到 dailylog 控制台。"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from .callsite import CallerInfo
from .levels import Level

if TYPE_CHECKING:  # pragma: no cover - 仅用于类型检查的导入
    from .logger import Logger


def level_from_stdlib(levelno: int) -> Level:
    """把标准库的数值等级映射为 Level。"""
    if levelno >= logging.CRITICAL:
        return Level.FATAL
    if levelno >= logging.ERROR:
        return Level.ERROR
    if levelno >= logging.WARNING:
        return Level.WARNING
    if levelno >= logging.INFO:
        return Level.INFO
    return Level.DEBUG


class InterceptHandler(logging.Handler):
    """标准库 logging handler，把记录写到目标 Logger 的控制台。

    调用点直接取自 LogRecord（funcName / lineno），不需要栈回溯。
    未指定目标时使用当前的默认 Logger。
    """

    def __init__(self, target: Optional["Logger"] = None) -> None:
        super().__init__()
        self.target = target

    def _resolve_target(self) -> "Logger":
        if self.target is not None:
            return self.target
        from .facade import get_logger

        return get_logger()

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = record.getMessage()
        except Exception:
            self.handleError(record)
            return

        caller = CallerInfo(
            module=record.name,
            function=record.funcName or "?",
            line=record.lineno,
            filename=record.pathname,
        )
        args = ()
        if record.exc_info and record.exc_info[1] is not None:
            args = (record.exc_info[1],)
        self._resolve_target().log_to_console(
            level_from_stdlib(record.levelno), message, *args, caller=caller
        )


def install_intercept(target: Optional["Logger"] = None) -> InterceptHandler:
    """用 InterceptHandler 替换根 logger 的全部 handler。"""
    handler = InterceptHandler(target)
    logging.root.handlers = [handler]
    logging.root.setLevel(0)
    return handler


def remove_intercept() -> None:
    """移除根 logger 上的 InterceptHandler。"""
    logging.root.handlers = [
        h for h in logging.root.handlers if not isinstance(h, InterceptHandler)
    ]


__all__ = [
    "InterceptHandler",
    "install_intercept",
    "level_from_stdlib",
    "remove_intercept",
]
