"""
可观测性：structlog 日志配置 + 轮次上下文
"""

from todo_agent.observability.context import bind_turn
from todo_agent.observability.logging_config import setup_logging

__all__ = ["bind_turn", "setup_logging"]
