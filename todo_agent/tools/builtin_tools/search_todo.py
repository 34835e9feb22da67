"""
searchTodo — 按内容做大小写不敏感的子串搜索
"""

from pydantic import BaseModel, Field

from todo_agent.todo.store import TodoStore
from todo_agent.tools.base import BaseTool


class _Params(BaseModel):
    query: str = Field(description="搜索关键字")


class SearchTodoTool(BaseTool):
    """搜索 Todo"""

    def __init__(self, store: TodoStore):
        self.store = store

    @property
    def name(self) -> str:
        return "searchTodo"

    @property
    def description(self) -> str:
        return "Search for all todos matching the query string using iLike operator in the database"

    @property
    def params_model(self) -> type[BaseModel]:
        return _Params

    async def execute(self, args: dict) -> list[dict]:
        todos = await self.store.search(args["query"])
        return [t.model_dump(mode="json") for t in todos]
