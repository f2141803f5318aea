"""测试共用的 fixture。"""

import io
from datetime import datetime, timedelta

import pytest

from dailylog.levels import Level
from dailylog.logger import Logger


class FakeClock:
    """可手动推进的时钟，用于模拟跨天。"""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 3, 9, 23, 59, 58, 123456))


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def log_dir(tmp_path):
    return tmp_path / "log"


@pytest.fixture
def make_logger(log_dir, stream, clock):
    """构造使用临时目录、内存流与模拟时钟的 Logger，测试结束后关闭。"""
    created = []

    def _make(level=Level.DEBUG, **kwargs):
        kwargs.setdefault("log_dir", log_dir)
        kwargs.setdefault("stream", stream)
        kwargs.setdefault("width", lambda: 20)
        kwargs.setdefault("clock", clock)
        instance = Logger(level, **kwargs)
        created.append(instance)
        return instance

    yield _make

    for instance in created:
        instance.close()
