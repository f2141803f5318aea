"""dailylog：分级、彩色的控制台日志 + 按日期轮转的日志文件。

特性：
- 六级冗长度上限（fatal < error < warning < info < text < debug）
- 带 ANSI 颜色的控制台输出与 inline（原地重绘）模式
- ``./log/DD-MM-YYYY.log`` 按天轮转、线程安全的文件追加
- 基于 loguru 的 handler 分发
- 可选的标准库 logging 拦截
"""

from .callsite import CallerInfo, caller_info
from .errors import DailyLogError, LogFileError, TerminalSizeError
from .facade import (
    configure_logger,
    debug,
    error,
    fatal,
    get_logger,
    get_text,
    info,
    log_to_console,
    log_to_file,
    set_global_level,
    start_inline,
    stop_inline,
    text,
    warning,
)
from .levels import Level, parse_level
from .logger import Logger

__all__ = [
    "CallerInfo",
    "DailyLogError",
    "Level",
    "LogFileError",
    "Logger",
    "TerminalSizeError",
    "caller_info",
    "configure_logger",
    "debug",
    "error",
    "fatal",
    "get_logger",
    "get_text",
    "info",
    "log_to_console",
    "log_to_file",
    "parse_level",
    "set_global_level",
    "start_inline",
    "stop_inline",
    "text",
    "warning",
]
