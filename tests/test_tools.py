"""
Unit tests for the tool registry and built-in todo tools.
"""

import pytest
from sqlalchemy.exc import OperationalError

from todo_agent.db.models import Base
from todo_agent.tools import InvalidToolCallError, ToolRegistry


class TestRegistry:
    """Tests for registration and catalog rendering."""

    def test_builtin_tools_registered(self, registry):
        assert registry.tool_names == ["getAllTodos", "createTodo", "searchTodo", "deleteTodoById"]
        assert registry.tool_count == 4

    def test_catalog_lists_signatures(self, registry):
        catalog = registry.catalog()

        assert "- getAllTodos(): Return all todos from database" in catalog
        assert "- createTodo(todo: string):" in catalog
        assert "- searchTodo(query: string):" in catalog
        assert "- deleteTodoById(id: integer):" in catalog

    def test_tools_carry_only_catalog_metadata(self, registry):
        for tool in registry._tools.values():
            assert tool.catalog_line().startswith(f"- {tool.signature()}: {tool.description}")
            assert not hasattr(tool, "risk_level")

    def test_empty_registry(self):
        registry = ToolRegistry()

        assert registry.catalog() == ""
        assert not registry.has_tool("createTodo")


class TestBindInput:
    """Tests for mapping an action's single input onto tool params."""

    def test_no_param_tool_ignores_input(self, registry):
        assert registry.bind_input("getAllTodos", "whatever") == {}

    def test_single_param_tool(self, registry):
        assert registry.bind_input("createTodo", "Buy milk") == {"todo": "Buy milk"}

    def test_string_id_coerced(self, registry):
        assert registry.bind_input("deleteTodoById", "2") == {"id": 2}

    def test_dict_input_used_as_kwargs(self, registry):
        assert registry.bind_input("searchTodo", {"query": "milk"}) == {"query": "milk"}

    def test_invalid_input_raises(self, registry):
        with pytest.raises(InvalidToolCallError) as exc_info:
            registry.bind_input("deleteTodoById", "not-a-number")

        assert exc_info.value.tool_name == "deleteTodoById"
        assert exc_info.value.cause is not None

    def test_missing_input_raises(self, registry):
        with pytest.raises(InvalidToolCallError):
            registry.bind_input("createTodo", None)


class TestExecute:
    """Tests for dispatching tool calls through the registry."""

    async def test_unknown_tool(self, registry):
        with pytest.raises(InvalidToolCallError, match="Invalid Tool Call."):
            await registry.execute("dropTable", "todos")

    async def test_create_then_list(self, registry):
        todo_id = await registry.execute("createTodo", "Buy milk")

        todos = await registry.execute("getAllTodos")

        assert todos == [
            {
                "id": todo_id,
                "text": "Buy milk",
                "created_at": todos[0]["created_at"],
                "updated_at": todos[0]["updated_at"],
            }
        ]
        assert isinstance(todos[0]["created_at"], str)

    async def test_search(self, registry):
        await registry.execute("createTodo", "Buy milk")
        await registry.execute("createTodo", "Walk the dog")

        results = await registry.execute("searchTodo", "MILK")

        assert [t["text"] for t in results] == ["Buy milk"]

    async def test_delete_reports_result(self, registry):
        todo_id = await registry.execute("createTodo", "Buy milk")

        assert await registry.execute("deleteTodoById", str(todo_id)) == {"deleted": True, "id": todo_id}
        assert await registry.execute("deleteTodoById", todo_id) == {"deleted": False, "id": todo_id}
        assert await registry.execute("getAllTodos") == []

    async def test_tool_errors_propagate(self, registry, engine):
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

        with pytest.raises(OperationalError):
            await registry.execute("getAllTodos")
