"""进程级默认 Logger 与模块级便捷函数。

默认实例在导入时创建（等级上限为 DEBUG），属于进程级可变状态；
应用可以在启动时调用 ``configure_logger`` 显式地重新初始化。
模块级函数都以 ``stacklevel=2`` 转发，调用点解析到这些函数的调用方。
"""

from __future__ import annotations

import os
from threading import RLock
from typing import Any, Optional, TextIO

from .intercept import install_intercept, remove_intercept
from .levels import Level
from .logger import DEFAULT_LOG_DIR, Logger
from .sinks.console import DEFAULT_WIDTH

_lock = RLock()
_default: Optional[Logger] = None


def configure_logger(
    *,
    level: Level | str | int = Level.DEBUG,
    log_dir: str | os.PathLike[str] = DEFAULT_LOG_DIR,
    fallback_width: int = DEFAULT_WIDTH,
    intercept_stdlib: bool = False,
    stream: Optional[TextIO] = None,
) -> Logger:
    """创建新的默认 Logger 并替换旧实例（旧实例会被关闭）。

    返回新的默认 Logger。
    """
    global _default, logger

    with _lock:
        new = Logger(
            level,
            log_dir=log_dir,
            stream=stream,
            fallback_width=fallback_width,
        )
        previous, _default = _default, new
        logger = new
        if previous is not None:
            previous.close()

        if intercept_stdlib:
            install_intercept()
        else:
            remove_intercept()
    return new


def get_logger() -> Logger:
    """返回当前的默认 Logger。"""
    with _lock:
        if _default is None:
            return configure_logger()
        return _default


def set_global_level(level: Level | str | int) -> None:
    get_logger().set_global_level(level)


def start_inline() -> None:
    get_logger().start_inline()


def stop_inline() -> None:
    get_logger().stop_inline()


def get_text(level: Level | str | int, message: str, *args: Any) -> str:
    return get_logger().get_text(level, message, *args, stacklevel=2)


def log_to_console(level: Level | str | int, message: str, *args: Any) -> None:
    get_logger().log_to_console(level, message, *args, stacklevel=2)


def log_to_file(message: str, *args: Any) -> None:
    get_logger().log_to_file(message, *args, stacklevel=2)


def fatal(message: str, *args: Any) -> None:
    get_logger().fatal(message, *args, stacklevel=2)


def error(message: str, *args: Any) -> None:
    get_logger().error(message, *args, stacklevel=2)


def warning(message: str, *args: Any) -> None:
    get_logger().warning(message, *args, stacklevel=2)


def info(message: str, *args: Any) -> None:
    get_logger().info(message, *args, stacklevel=2)


def text(message: str, *args: Any) -> None:
    get_logger().text(message, *args, stacklevel=2)


def debug(message: str, *args: Any) -> None:
    get_logger().debug(message, *args, stacklevel=2)


_DEFAULT_LOG_DIR = os.getenv("DAILYLOG_LOG_DIR", DEFAULT_LOG_DIR)
logger = configure_logger(log_dir=_DEFAULT_LOG_DIR)


__all__ = [
    "configure_logger",
    "debug",
    "error",
    "fatal",
    "get_logger",
    "get_text",
    "info",
    "log_to_console",
    "log_to_file",
    "logger",
    "set_global_level",
    "start_inline",
    "stop_inline",
    "text",
    "warning",
]
