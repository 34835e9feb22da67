"""
createTodo — 新建一条 Todo，返回新 id
"""

from pydantic import BaseModel, Field

from todo_agent.todo.store import TodoStore
from todo_agent.tools.base import BaseTool


class _Params(BaseModel):
    todo: str = Field(min_length=1, description="Todo 内容")


class CreateTodoTool(BaseTool):
    """新建 Todo"""

    def __init__(self, store: TodoStore):
        self.store = store

    @property
    def name(self) -> str:
        return "createTodo"

    @property
    def description(self) -> str:
        return (
            "Create a new todo in the database and takes todo as a string "
            "and returns the ID of the created todo"
        )

    @property
    def params_model(self) -> type[BaseModel]:
        return _Params

    async def execute(self, args: dict) -> int:
        return await self.store.create(args["todo"])
