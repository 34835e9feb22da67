"""
数据库引擎：AsyncEngine 创建 + AsyncSession 工厂 + 启动建表
"""

import structlog
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from todo_agent.config import Settings, get_settings
from todo_agent.db.models import Base

log = structlog.get_logger()


def create_engine_from_settings(settings: Settings | None = None) -> AsyncEngine:
    """按配置创建 AsyncEngine，连接池参数只对非 SQLite 生效"""
    settings = settings or get_settings()
    kwargs: dict = {"echo": settings.DB_ECHO}
    if not settings.is_sqlite:
        kwargs.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
        )
    return create_async_engine(settings.DATABASE_URL, **kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """expire_on_commit=False：commit 后仍可读取已加载的属性"""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_db(engine: AsyncEngine, create_tables: bool = True) -> None:
    """
    启动预检：Fail Fast，数据库不可用时直接抛异常。

    create_tables=True 时补建缺失的表（已存在的表不动）。
    """
    async with engine.begin() as conn:
        await conn.execute(text("SELECT 1"))
        if create_tables:
            await conn.run_sync(Base.metadata.create_all)
    log.info("数据库连接正常", url=engine.url.render_as_string(hide_password=True))
