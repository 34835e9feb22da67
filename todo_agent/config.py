"""
全局配置模块：通过 pydantic-settings 读取 .env / 环境变量
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用全局配置，从当前目录 .env 文件加载"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # ── 数据库 ──
    DATABASE_URL: str = "sqlite+aiosqlite:///./todos.db"
    DB_ECHO: bool = False  # 打印 SQL 日志，调试时可在 .env 设为 true
    DB_AUTO_CREATE: bool = True  # 启动时自动建表（生产环境建议走 alembic）

    # ── 连接池（SQLite 不生效） ──
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 1800

    # ── LLM（LiteLLM 格式的模型名） ──
    LLM_DEFAULT_MODEL: str = "gpt-3.5-turbo-0125"
    LLM_API_KEY: str = Field(
        default="",
        validation_alias=AliasChoices("LLM_API_KEY", "OPENAI_API_KEY"),
    )
    LLM_API_BASE: str | None = None  # 自定义 API 端点
    LLM_TIMEOUT: int = 60  # LLM 调用超时（秒）

    # ── 对话循环 ──
    AGENT_MAX_STEPS: int = 10  # 单轮用户输入内最多调用 LLM 的次数
    AGENT_OBSERVATION_ROLE: str = "developer"  # observation 消息使用的 role

    # ── 应用 ──
    LOG_LEVEL: str = "WARNING"
    ENV: str = "development"  # development | production
    APP_NAME: str = "todo-agent"

    @model_validator(mode="after")
    def _check_max_steps(self) -> "Settings":
        """至少要给模型一次回答的机会"""
        if self.AGENT_MAX_STEPS < 1:
            raise ValueError("AGENT_MAX_STEPS 必须 >= 1")
        return self

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """单例获取配置（带缓存）"""
    return Settings()
