"""dailylog 的异常类型。"""

from __future__ import annotations


class DailyLogError(Exception):
    """dailylog 通用错误类型。"""


class TerminalSizeError(DailyLogError, OSError):
    """无法查询控制终端的尺寸。"""


class LogFileError(DailyLogError, OSError):
    """日志目录或日志文件无法创建/打开。"""


__all__ = ["DailyLogError", "TerminalSizeError", "LogFileError"]
