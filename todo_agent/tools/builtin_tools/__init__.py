"""
内置工具集：把四个 Todo 工具注册到 ToolRegistry

使用方式：
    from todo_agent.tools.builtin_tools import create_builtin_registry
    registry = create_builtin_registry(store)
"""

from todo_agent.todo.store import TodoStore
from todo_agent.tools.builtin_tools.create_todo import CreateTodoTool
from todo_agent.tools.builtin_tools.delete_todo_by_id import DeleteTodoByIdTool
from todo_agent.tools.builtin_tools.get_all_todos import GetAllTodosTool
from todo_agent.tools.builtin_tools.search_todo import SearchTodoTool
from todo_agent.tools.registry import ToolRegistry


def create_builtin_registry(store: TodoStore) -> ToolRegistry:
    """创建并注册所有内置工具的 Registry 实例"""
    registry = ToolRegistry()

    registry.register(GetAllTodosTool(store))
    registry.register(CreateTodoTool(store))
    registry.register(SearchTodoTool(store))
    registry.register(DeleteTodoByIdTool(store))

    return registry
