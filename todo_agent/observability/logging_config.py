"""
结构化日志配置：structlog + contextvars 自动注入 turn_id
- 开发环境：彩色文本输出
- 生产环境：JSON 输出
"""

import logging
import sys

import structlog


def setup_logging(env: str = "development", level: str = "WARNING") -> None:
    """初始化结构化日志"""
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.WARNING

    # 共享处理器链
    shared_processors: list = [
        structlog.contextvars.merge_contextvars,  # 自动合并 turn_id 等上下文
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if env == "production":
        shared_processors.append(structlog.processors.JSONRenderer())
    else:
        shared_processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        # 日志走 stderr，不和对话输出混在一起
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    # 让 SQLAlchemy 的日志也走同一个输出流
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )
