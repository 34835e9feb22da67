"""
工具系统：BaseTool 抽象基类 + ToolRegistry 注册中心 + 内置 Todo 工具集
"""

from todo_agent.tools.base import BaseTool
from todo_agent.tools.registry import InvalidToolCallError, ToolRegistry

__all__ = ["BaseTool", "InvalidToolCallError", "ToolRegistry"]
