"""按日期轮转的文件 sink。

- 首次写入时才创建日志目录并打开 ``DD-MM-YYYY.log``（追加模式）
- 每次写入前比较当前日期与已打开文件的日期，跨天则切换到新文件并关闭旧句柄
- 轮转判断与写入在同一把锁内完成，并发写入不会交错
"""

from __future__ import annotations

import os
from datetime import date, datetime
from pathlib import Path
from threading import Lock
from typing import Callable, Optional, TextIO

from ..errors import LogFileError

FILE_DATE_FORMAT = "%d-%m-%Y"


class DailyFileSink:
    """每个日历日一个日志文件的 sink。

    创建目录或打开文件失败时调用 ``on_error``，本次写入被丢弃；
    下一次写入会重新尝试。
    """

    def __init__(
        self,
        directory: str | os.PathLike[str] = "./log",
        *,
        clock: Callable[[], datetime] = datetime.now,
        on_error: Optional[Callable[[LogFileError], None]] = None,
        encoding: str = "utf-8",
    ) -> None:
        self.directory = Path(directory)
        self.encoding = encoding
        self._clock = clock
        self._on_error = on_error
        self._lock = Lock()
        self._file: Optional[TextIO] = None
        self._current_date: Optional[date] = None
        self._current_path: Optional[Path] = None

    @property
    def current_path(self) -> Optional[Path]:
        """当前打开的日志文件路径，尚未打开时为 None。"""
        return self._current_path

    @property
    def current_date(self) -> Optional[date]:
        return self._current_date

    def path_for_date(self, target: date) -> Path:
        return self.directory / f"{target.strftime(FILE_DATE_FORMAT)}.log"

    def _open(self, target: date) -> TextIO:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise LogFileError(
                f"cannot create log directory {self.directory}: {exc}"
            ) from exc

        path = self.path_for_date(target)
        try:
            return open(path, "a", encoding=self.encoding)
        except OSError as exc:
            raise LogFileError(f"cannot open log file {path}: {exc}") from exc

    def _switch_locked(self, target: date) -> None:
        # 新文件打开成功后才关闭旧句柄，失败时保持原状
        stream = self._open(target)
        previous = self._file
        self._file = stream
        self._current_date = target
        self._current_path = self.path_for_date(target)
        if previous is not None:
            previous.close()

    def write(self, message: str) -> None:
        with self._lock:
            today = self._clock().date()
            if self._file is None or today != self._current_date:
                try:
                    self._switch_locked(today)
                except LogFileError as exc:
                    if self._on_error is None:
                        raise
                    self._on_error(exc)
                    return
            self._file.write(message)
            self._file.flush()

    def flush(self) -> None:
        with self._lock:
            if self._file is not None:
                self._file.flush()

    def close(self) -> None:
        with self._lock:
            if self._file is not None:
                self._file.close()
            self._file = None
            self._current_date = None
            self._current_path = None


__all__ = ["DailyFileSink", "FILE_DATE_FORMAT"]
