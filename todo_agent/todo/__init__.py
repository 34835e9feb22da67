"""
Todo 模块：todos 表的存储访问

提供 TodoStore（四个表操作）和 TodoRecord 读模型，
供内置工具 getAllTodos / createTodo / searchTodo / deleteTodoById 使用。
"""

from todo_agent.todo.schemas import TodoRecord
from todo_agent.todo.store import TodoStore

__all__ = ["TodoRecord", "TodoStore"]
