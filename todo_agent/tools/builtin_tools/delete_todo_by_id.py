"""
deleteTodoById — 按 id 删除 Todo
"""

from pydantic import BaseModel, Field

from todo_agent.todo.store import TodoStore
from todo_agent.tools.base import BaseTool


class _Params(BaseModel):
    # LLM 经常传字符串 id（"2"），Pydantic lax 模式会转成 int
    id: int = Field(description="Todo ID")


class DeleteTodoByIdTool(BaseTool):
    """按 id 删除 Todo"""

    def __init__(self, store: TodoStore):
        self.store = store

    @property
    def name(self) -> str:
        return "deleteTodoById"

    @property
    def description(self) -> str:
        return "Delete a todo by ID given in the db"

    @property
    def params_model(self) -> type[BaseModel]:
        return _Params

    async def execute(self, args: dict) -> dict:
        deleted = await self.store.delete_by_id(args["id"])
        return {"deleted": deleted, "id": args["id"]}
