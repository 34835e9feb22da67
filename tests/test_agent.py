"""
Tests for the TodoAgent conversation loop, driven by a scripted fake LLM.
"""

import json

import pytest

from todo_agent.agent import AgentConfig, TodoAgent
from todo_agent.agent.engine import DEGRADED_REPLY
from todo_agent.guardrails import ReplyParseError
from todo_agent.tools import InvalidToolCallError


def _reply(**payload) -> str:
    return json.dumps(payload)


@pytest.fixture
def make_agent(registry, scripted_llm):
    def _make(replies, **config):
        llm = scripted_llm(replies)
        agent = TodoAgent(llm, registry, AgentConfig(**config))
        return agent, llm
    return _make


class TestMessageLog:
    """Tests for the append-only message log."""

    def test_starts_with_system_prompt(self, make_agent):
        agent, _ = make_agent([])

        assert len(agent.messages) == 1
        assert agent.messages[0]["role"] == "system"
        assert "createTodo(todo: string)" in agent.messages[0]["content"]
        assert '"type": "observation"' in agent.messages[0]["content"]

    async def test_direct_output(self, make_agent):
        agent, llm = make_agent([_reply(type="output", output="Hello!")])

        assert await agent.respond("hi") == "Hello!"

        assert [m["role"] for m in agent.messages] == ["system", "user", "assistant"]
        assert json.loads(agent.messages[1]["content"]) == {"type": "user", "user": "hi"}
        assert llm.calls[0].response_format == {"type": "json_object"}

    async def test_history_carries_across_turns(self, make_agent):
        agent, llm = make_agent([
            _reply(type="output", output="What items?"),
            _reply(type="output", output="Got it."),
        ])

        await agent.respond("Add a shopping task")
        await agent.respond("milk and eggs")

        # the second call sees the whole first turn
        assert len(llm.calls[1].messages) == 4
        assert llm.calls[1].messages[2]["content"] == _reply(type="output", output="What items?")

    async def test_reset_keeps_only_system_prompt(self, make_agent):
        agent, _ = make_agent([_reply(type="output", output="Hello!")])
        await agent.respond("hi")

        agent.reset()

        assert [m["role"] for m in agent.messages] == ["system"]


class TestActions:
    """Tests for action dispatch and observations."""

    async def test_plan_action_observation_output(self, make_agent, store):
        agent, llm = make_agent([
            _reply(type="plan", plan="I will use createTodo."),
            _reply(type="action", function="createTodo", input="Buy milk"),
            _reply(type="output", output="Your todo has been created successfully."),
        ])

        events = [e async for e in agent.run_turn("Add buy milk")]

        assert [e.kind for e in events] == ["plan", "action", "observation", "output"]
        todo_id = events[2].data
        assert [t.text for t in await store.get_all()] == ["Buy milk"]
        assert [t.id for t in await store.get_all()] == [todo_id]

        roles = [m["role"] for m in agent.messages]
        assert roles == ["system", "user", "assistant", "assistant", "developer", "assistant"]
        assert json.loads(agent.messages[4]["content"]) == {"type": "observation", "observation": todo_id}
        assert len(llm.calls) == 3

    async def test_observation_role_configurable(self, make_agent):
        agent, _ = make_agent(
            [
                _reply(type="action", function="getAllTodos", input=""),
                _reply(type="output", output="No todos."),
            ],
            observation_role="user",
        )

        await agent.respond("list")

        assert agent.messages[3] == {
            "role": "user",
            "content": json.dumps({"type": "observation", "observation": []}, separators=(",", ":")),
        }

    async def test_search_and_delete(self, make_agent, store):
        milk = await store.create("Buy milk")
        await store.create("Walk the dog")
        agent, _ = make_agent([
            _reply(type="action", function="searchTodo", input="MILK"),
            _reply(type="action", function="deleteTodoById", input=str(milk)),
            _reply(type="output", output="Deleted."),
        ])

        events = [e async for e in agent.run_turn("delete the milk todo")]

        observations = [e.data for e in events if e.kind == "observation"]
        assert [t["id"] for t in observations[0]] == [milk]
        assert observations[1] == {"deleted": True, "id": milk}
        assert [t.text for t in await store.get_all()] == ["Walk the dog"]

    async def test_unknown_tool_raises(self, make_agent):
        agent, _ = make_agent([_reply(type="action", function="dropTable", input="todos")])

        with pytest.raises(InvalidToolCallError):
            await agent.respond("drop everything")

        # the offending reply is already in the log
        assert json.loads(agent.messages[-1]["content"])["function"] == "dropTable"


class TestFailures:
    """Tests for parse failures and the step cap."""

    async def test_unparsable_reply_raises(self, make_agent):
        agent, _ = make_agent(["I am not JSON"])

        with pytest.raises(ReplyParseError):
            await agent.respond("hi")

        assert agent.messages[-1] == {"role": "assistant", "content": "I am not JSON"}

    async def test_step_cap_degrades(self, make_agent):
        agent, llm = make_agent(
            [_reply(type="plan", plan="thinking...")] * 3,
            max_steps=3,
        )

        events = [e async for e in agent.run_turn("hi")]

        assert events[-1].kind == "output"
        assert events[-1].is_degraded
        assert events[-1].data == DEGRADED_REPLY
        assert len(llm.calls) == 3

    async def test_echoed_messages_are_skipped(self, make_agent):
        agent, llm = make_agent([
            _reply(type="user", user="hi"),
            _reply(type="output", output="Hello!"),
        ])

        assert await agent.respond("hi") == "Hello!"
        assert len(llm.calls) == 2
