"""日志等级模型。

等级按「严重 → 冗长」排序，数值越大越冗长；全局等级是一个冗长度上限，
只有 ``level <= ceiling`` 的消息才会输出。
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class Level(IntEnum):
    """有序的日志等级枚举。"""

    FATAL = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    TEXT = 4
    DEBUG = 5

    @property
    def marker(self) -> str:
        """三字母等级标记，TEXT 没有标记。"""
        return _MARKERS[self]

    @property
    def loguru_name(self) -> str:
        """分发给 loguru 时使用的等级名称。"""
        return _LOGURU_NAMES[self]


_MARKERS = {
    Level.FATAL: "PAN",
    Level.ERROR: "ERR",
    Level.WARNING: "WRN",
    Level.INFO: "INF",
    Level.TEXT: "",
    Level.DEBUG: "DBG",
}

_LOGURU_NAMES = {
    Level.FATAL: "CRITICAL",
    Level.ERROR: "ERROR",
    Level.WARNING: "WARNING",
    Level.INFO: "INFO",
    Level.TEXT: "INFO",
    Level.DEBUG: "DEBUG",
}

_NAMES = {
    "debug": Level.DEBUG,
    "text": Level.TEXT,
    "info": Level.INFO,
    "warning": Level.WARNING,
    "error": Level.ERROR,
    "fatal": Level.FATAL,
}


def parse_level(value: Any) -> Level:
    """把名称解析为 Level。

    名称区分大小写；无法识别的输入一律回退为 ``Level.TEXT``，从不抛出异常。
    """
    if isinstance(value, Level):
        return value
    # bool 是 int 的子类，不把 True/False 当作等级
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Level(value)
        except ValueError:
            return Level.TEXT
    if isinstance(value, str):
        return _NAMES.get(value, Level.TEXT)
    return Level.TEXT


__all__ = ["Level", "parse_level"]
