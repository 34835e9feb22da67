"""
Todo 存储层：todos 表的唯一访问入口

四个操作：全量列出 / 新建 / 大小写不敏感子串搜索 / 按 id 删除。
上层（工具、对话循环）不直接碰表。

数据库异常不在此处兜底，直接向上传播。
"""

import structlog
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from todo_agent.db.models.todo import Todo
from todo_agent.todo.schemas import TodoRecord

log = structlog.get_logger()

_LIKE_ESCAPE = "\\"


def _escape_like(query: str) -> str:
    """转义 LIKE 通配符，让用户输入按字面匹配"""
    return (
        query.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )


class TodoStore:
    """todos 表的 CRUD"""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def get_all(self) -> list[TodoRecord]:
        """读取全部 Todo（按 id 升序）"""
        async with self._session_factory() as db:
            result = await db.execute(select(Todo).order_by(Todo.id))
            return [TodoRecord.model_validate(row) for row in result.scalars().all()]

    async def create(self, text: str) -> int:
        """新建一条 Todo，返回数据库分配的 id"""
        async with self._session_factory() as db:
            todo = Todo(text=text)
            db.add(todo)
            await db.commit()
            log.info("Todo 已创建", todo_id=todo.id)
            return todo.id

    async def search(self, query: str) -> list[TodoRecord]:
        """按内容做大小写不敏感的子串匹配（ILIKE '%query%'）"""
        pattern = f"%{_escape_like(query)}%"
        async with self._session_factory() as db:
            result = await db.execute(
                select(Todo)
                .where(Todo.text.ilike(pattern, escape=_LIKE_ESCAPE))
                .order_by(Todo.id)
            )
            return [TodoRecord.model_validate(row) for row in result.scalars().all()]

    async def delete_by_id(self, todo_id: int) -> bool:
        """按 id 删除，返回是否真的删掉了一行；id 不存在时为 no-op"""
        async with self._session_factory() as db:
            result = await db.execute(delete(Todo).where(Todo.id == todo_id))
            await db.commit()
        deleted = result.rowcount > 0
        log.info("Todo 删除", todo_id=todo_id, deleted=deleted)
        return deleted
