"""应用配置（基于 pydantic-settings）。

环境变量优先；日志等级名称沿用 ``parse_level`` 的解析规则，
无法识别的名称回退为 text。
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """日志配置模型（可通过环境变量注入）。

    环境变量前缀：DAILYLOG_
    例如 DAILYLOG_LOG_LEVEL=info
    """

    log_level: str = "debug"
    log_dir: str = "./log"
    # inline 模式下终端宽度查询失败时使用的列数
    log_fallback_width: int = Field(default=80, gt=0)
    log_intercept_stdlib: bool = False

    model_config = SettingsConfigDict(env_prefix="DAILYLOG_")

    @field_validator("log_level")
    @classmethod
    def strip_level(cls, v: str) -> str:
        # 只去掉空白，名称本身区分大小写
        return v.strip()


# module-level cached settings
_SETTINGS: Optional[Settings] = None


def get_settings(force_reload: bool = False) -> Settings:
    """返回全局 Settings 单例（按需从环境加载）。"""

    global _SETTINGS
    if _SETTINGS is None or force_reload:
        _SETTINGS = Settings()
    return _SETTINGS


__all__ = ["Settings", "get_settings"]
