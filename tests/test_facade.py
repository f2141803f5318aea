"""测试 dailylog.facade 模块（进程级默认实例）。"""

import io
import sys
from datetime import datetime

import pytest

import dailylog
from dailylog import facade
from dailylog.levels import Level
from dailylog.logger import Logger


@pytest.fixture
def console(tmp_path):
    """把默认实例替换为写入内存流的实例，测试后恢复默认配置。"""
    buffer = io.StringIO()
    facade.configure_logger(stream=buffer, log_dir=tmp_path / "log")
    yield buffer
    facade.configure_logger()


class TestConfigureLogger:
    """测试 configure_logger 与 get_logger。"""

    def test_returns_new_default(self, console):
        """测试 configure_logger 返回并安装新的默认实例。"""
        current = facade.get_logger()
        assert isinstance(current, Logger)
        assert facade.logger is current

    def test_default_ceiling_is_debug(self, console):
        """测试默认等级上限为最冗长的 DEBUG。"""
        assert facade.get_logger().global_level is Level.DEBUG

    def test_replaces_and_closes_previous(self, console, tmp_path):
        """测试重新配置会关闭旧实例，旧实例不再输出。"""
        old = facade.get_logger()
        other = io.StringIO()
        new = facade.configure_logger(stream=other, log_dir=tmp_path / "log")

        old.info("from old")
        facade.info("from new")

        assert new is not old
        assert console.getvalue() == ""
        assert "from new" in other.getvalue()

    def test_level_from_name(self, console, tmp_path):
        """测试 level 参数接受字符串名称。"""
        configured = facade.configure_logger(
            level="warning", stream=console, log_dir=tmp_path / "log"
        )
        assert configured.global_level is Level.WARNING


class TestModuleFunctions:
    """测试模块级便捷函数。"""

    def test_end_to_end_debug(self, console):
        """测试模块级 debug 的输出与调用点。"""
        line = sys._getframe().f_lineno + 1
        facade.debug("connecting", "host1", 8080)

        output = console.getvalue()
        assert "DBG" in output
        assert "connecting" in output
        assert "host1" in output
        assert "8080" in output
        assert f"test_end_to_end_debug [{line}]" in output

    def test_set_global_level(self, console):
        """测试 set_global_level 调整默认实例的上限。"""
        facade.set_global_level(Level.INFO)
        facade.debug("connecting", "host1", 8080)
        assert console.getvalue() == ""

        facade.set_global_level("debug")
        facade.debug("visible")
        assert "visible" in console.getvalue()

    @pytest.mark.parametrize(
        "name, marker",
        [
            ("fatal", "PAN"),
            ("error", "ERR"),
            ("warning", "WRN"),
            ("info", "INF"),
            ("debug", "DBG"),
        ],
    )
    def test_level_functions(self, console, name, marker):
        """测试各等级函数转发到默认实例。"""
        getattr(facade, name)("hello")
        assert marker in console.getvalue()

    def test_text(self, console):
        facade.text("plain words")
        assert "plain words" in console.getvalue()

    def test_log_to_console_caller(self, console):
        """测试 log_to_console 的调用点指向调用方。"""
        line = sys._getframe().f_lineno + 1
        facade.log_to_console(Level.ERROR, "failed")
        assert f"test_log_to_console_caller [{line}]" in console.getvalue()

    def test_get_text_caller(self, console):
        """测试 get_text 只返回文本、不输出，调用点指向调用方。"""
        line = sys._getframe().f_lineno + 1
        result = facade.get_text(Level.WARNING, "composed")
        assert "composed" in result
        assert f"test_get_text_caller [{line}]" in result
        assert console.getvalue() == ""

    def test_inline(self, console):
        """测试模块级 inline 开关。"""
        facade.start_inline()
        facade.text("1/3")
        facade.text("2/3")
        assert "\n" not in console.getvalue()
        facade.stop_inline()
        assert console.getvalue().count("\n") == 1

    def test_log_to_file(self, console, tmp_path):
        """测试 log_to_file 写入当天的日志文件并记录调用点。"""
        line = sys._getframe().f_lineno + 1
        facade.log_to_file("persisted", 1)

        path = tmp_path / "log" / f"{datetime.now():%d-%m-%Y}.log"
        content = path.read_text(encoding="utf-8")
        assert "\tpersisted\t [1]\n" in content
        assert f"test_log_to_file[{line}]" in content


def test_package_reexports():
    """测试包根导出门面函数。"""
    assert dailylog.debug is facade.debug
    assert dailylog.set_global_level is facade.set_global_level
    assert dailylog.Level is Level
