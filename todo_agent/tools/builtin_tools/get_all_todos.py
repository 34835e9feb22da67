"""
getAllTodos — 列出数据库中的全部 Todo
"""

from pydantic import BaseModel

from todo_agent.todo.store import TodoStore
from todo_agent.tools.base import BaseTool


class _EmptyParams(BaseModel):
    """无参数"""


class GetAllTodosTool(BaseTool):
    """列出全部 Todo"""

    def __init__(self, store: TodoStore):
        self.store = store

    @property
    def name(self) -> str:
        return "getAllTodos"

    @property
    def description(self) -> str:
        return "Return all todos from database"

    @property
    def params_model(self) -> type[BaseModel]:
        return _EmptyParams

    async def execute(self, args: dict) -> list[dict]:
        todos = await self.store.get_all()
        return [t.model_dump(mode="json") for t in todos]
