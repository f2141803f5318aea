"""测试 dailylog.sinks.console 模块。"""

import io
import os
from unittest.mock import patch

import pytest

from dailylog.errors import TerminalSizeError
from dailylog.sinks.console import ConsoleSink, query_terminal_width


def _broken_width():
    raise TerminalSizeError("not a tty")


class TestQueryTerminalWidth:
    """测试终端宽度查询。"""

    @patch("dailylog.sinks.console.os.get_terminal_size")
    def test_returns_columns(self, mock_size):
        """测试返回终端列数。"""
        mock_size.return_value = os.terminal_size((132, 40))
        assert query_terminal_width(1) == 132
        mock_size.assert_called_once_with(1)

    @patch("dailylog.sinks.console.os.get_terminal_size")
    def test_os_error_becomes_terminal_size_error(self, mock_size):
        """测试查询失败时抛出可区分的 TerminalSizeError。"""
        mock_size.side_effect = OSError(25, "Inappropriate ioctl for device")
        with pytest.raises(TerminalSizeError):
            query_terminal_width(1)

    def test_terminal_size_error_is_os_error(self):
        """测试 TerminalSizeError 同时是 OSError。"""
        assert issubclass(TerminalSizeError, OSError)


class TestConsoleSinkWidth:
    """测试宽度回退策略。"""

    def test_uses_queried_width(self):
        """测试查询成功时使用终端宽度。"""
        sink = ConsoleSink(io.StringIO(), width=lambda: 100)
        assert sink.terminal_width() == 100

    def test_falls_back_on_query_failure(self):
        """测试查询失败时退回 fallback_width 而不是中止。"""
        sink = ConsoleSink(io.StringIO(), width=_broken_width, fallback_width=64)
        assert sink.terminal_width() == 64

    def test_falls_back_on_zero_columns(self):
        """测试 0 列（非终端）时同样回退。"""
        sink = ConsoleSink(io.StringIO(), width=lambda: 0)
        assert sink.terminal_width() == 80


class TestConsoleSinkFrame:
    """测试普通模式与 inline 模式的输出框架。"""

    def test_normal_mode_appends_newline(self):
        """测试普通模式在行尾追加换行。"""
        sink = ConsoleSink(io.StringIO(), width=lambda: 10)
        assert sink.frame("hello", inline=False) == "hello\n"

    def test_inline_mode_erases_line_first(self):
        """测试 inline 模式先用空格擦除整行再重绘，且不加换行。"""
        sink = ConsoleSink(io.StringIO(), width=lambda: 10)
        assert sink.frame("hello", inline=True) == "\r" + " " * 10 + "\rhello"

    def test_inline_mode_with_fallback_width(self):
        """测试 inline 模式在宽度查询失败时使用回退宽度擦除。"""
        sink = ConsoleSink(io.StringIO(), width=_broken_width, fallback_width=5)
        assert sink.frame("x", inline=True) == "\r     \rx"


class TestConsoleSinkWrite:
    """测试写入目标流。"""

    def test_writes_to_injected_stream(self):
        """测试写入注入的流。"""
        buffer = io.StringIO()
        sink = ConsoleSink(buffer)
        sink.write("abc")
        sink.flush()
        assert buffer.getvalue() == "abc"

    def test_resolves_stdout_at_write_time(self, capsys):
        """测试未注入流时在写入时解析 sys.stdout。"""
        sink = ConsoleSink()
        sink.write("to stdout")
        assert capsys.readouterr().out == "to stdout"
