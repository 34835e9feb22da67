"""
模型统一导出：Alembic 自动发现需要导入所有模型
"""

from todo_agent.db.models.base import Base
from todo_agent.db.models.todo import Todo

__all__ = ["Base", "Todo"]
