"""日志行格式化。

控制台行按等级着色（ANSI 转义序列），文件行为纯文本、以制表符分隔。
两者都把参数中的换行改写为 ``\\n\\t``，使续行缩进在日志行之下。
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Sequence

from .callsite import CallerInfo
from .levels import Level

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
PURPLE = "\033[35m"
CYAN = "\033[36m"
WHITE = "\033[37m"
DEFAULT = "\033[39m"

BACKGROUND_BLACK = "\033[40m"

BOLD = "\033[1m"
UNDERLINE = "\033[4m"
INVERSE = "\033[7m"

TIME_FORMAT = "%H:%M:%S.%f"

# 参数之间的分隔
ARG_GAP = "   "


@dataclass(frozen=True)
class LevelStyle:
    """单个等级在控制台上的外观。"""

    marker: str
    message: str
    args: str
    show_time: bool = True
    show_caller: bool = True


STYLES: dict[Level, LevelStyle] = {
    Level.FATAL: LevelStyle(
        marker=RESET + BOLD + INVERSE + RED + BOLD + Level.FATAL.marker + RESET,
        message=RESET + RED + BACKGROUND_BLACK,
        args=UNDERLINE,
    ),
    Level.ERROR: LevelStyle(
        marker=RESET + INVERSE + RED + BOLD + Level.ERROR.marker + RESET,
        message=RESET + RED,
        args=RESET + WHITE + UNDERLINE,
    ),
    Level.WARNING: LevelStyle(
        marker=RESET + INVERSE + YELLOW + Level.WARNING.marker + RESET,
        message=BOLD,
        args=RESET + WHITE,
    ),
    Level.INFO: LevelStyle(
        marker=RESET + INVERSE + BLUE + Level.INFO.marker + RESET,
        message=RESET + CYAN,
        args=RESET + BLUE,
        show_caller=False,
    ),
    Level.TEXT: LevelStyle(
        marker="",
        message=RESET + BLUE,
        args=RESET + WHITE,
        show_time=False,
        show_caller=False,
    ),
    Level.DEBUG: LevelStyle(
        marker=RESET + INVERSE + PURPLE + Level.DEBUG.marker + RESET,
        message=RESET + GREEN,
        args=RESET + BLUE,
    ),
}

_FALLBACK_STYLE = LevelStyle(marker=DEFAULT + "---", message="", args="")


def render_value(value: Any) -> str:
    """把参数转为文本；``__str__`` 抛出异常时返回占位串而不是向上抛出。"""
    try:
        return str(value)
    except Exception as exc:
        return f"<unprintable {type(value).__name__}: {exc}>"


def indent_continuations(text: str) -> str:
    """把换行改写为换行 + 制表符。"""
    return text.replace("\n", "\n\t")


def format_console(
    level: Level,
    message: str,
    args: Sequence[Any],
    caller: CallerInfo,
    now: datetime,
) -> str:
    """构建一行带颜色的控制台日志（不含结尾换行）。

    各段依次为：时间戳、等级标记、消息、参数、调用点。
    INFO 与 TEXT 不显示调用点，TEXT 也不显示时间戳。
    """
    style = STYLES.get(level, _FALLBACK_STYLE)

    timestamp = WHITE + now.strftime(TIME_FORMAT) if style.show_time else ""
    location = (
        f"{WHITE}{caller.qualified} [{caller.line}]" if style.show_caller else ""
    )

    rendered = RESET + "".join(
        f"{style.args}{render_value(arg)}{RESET}{ARG_GAP}" for arg in args
    )
    rendered = indent_continuations(rendered)

    return (
        f"{timestamp} {style.marker} {style.message}{render_value(message)}{RESET}"
        f"{ARG_GAP}{rendered}{ARG_GAP}{location}{RESET}"
    )


def format_file(
    message: str,
    args: Sequence[Any],
    caller: CallerInfo,
    now: datetime,
) -> str:
    """构建一行纯文本文件日志（以 ``\\n`` 结尾）。

    格式：``时间戳<TAB>函数[行号]<TAB>消息<TAB> [参数1] [参数2]``
    """
    rendered = "".join(f" [{render_value(arg)}]" for arg in args)
    body = (
        f"{now.strftime(TIME_FORMAT)}\t{caller.qualified}[{caller.line}]"
        f"\t{render_value(message)}\t{rendered}"
    )
    return indent_continuations(body) + "\n"


__all__ = [
    "LevelStyle",
    "STYLES",
    "TIME_FORMAT",
    "format_console",
    "format_file",
    "indent_continuations",
    "render_value",
]
