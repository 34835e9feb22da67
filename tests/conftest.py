"""
Shared pytest fixtures: in-memory SQLite store, tool registry, scripted LLM.
"""

from types import SimpleNamespace

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from todo_agent.db.engine import create_session_factory
from todo_agent.db.models import Base
from todo_agent.llm.client import JSON_MODE, LLMResponse
from todo_agent.observability import setup_logging
from todo_agent.todo import TodoStore
from todo_agent.tools.builtin_tools import create_builtin_registry


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    setup_logging(level="WARNING")


@pytest.fixture
async def engine():
    """In-memory SQLite shared across connections."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def store(engine):
    return TodoStore(create_session_factory(engine))


@pytest.fixture
def registry(store):
    return create_builtin_registry(store)


class ScriptedLLM:
    """Fake LLMClient returning canned replies in order and recording every call."""

    def __init__(self, replies: list[str]):
        self.replies = list(replies)
        self.calls: list[SimpleNamespace] = []

    async def chat(self, messages, model=None, response_format=JSON_MODE):
        # copy: the agent keeps appending to the same list
        self.calls.append(SimpleNamespace(
            messages=[dict(m) for m in messages],
            model=model,
            response_format=response_format,
        ))
        if not self.replies:
            raise AssertionError("ScriptedLLM ran out of replies")
        return LLMResponse(
            content=self.replies.pop(0),
            model=model or "fake-model",
            usage={"prompt_tokens": 1, "completion_tokens": 1, "total_tokens": 2},
            finish_reason="stop",
        )


@pytest.fixture
def scripted_llm():
    return ScriptedLLM
