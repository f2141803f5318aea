"""控制台与按日期轮转的文件 sink，均以 loguru handler 的形式注册。"""

from .console import ConsoleSink, query_terminal_width
from .file import DailyFileSink

__all__ = ["ConsoleSink", "DailyFileSink", "query_terminal_width"]
