"""
Todo Agent 对话循环：维护消息日志，驱动 LLM ⇄ 工具 的内层循环

外层（控制台）每读一行用户输入调用一次 run_turn / respond；
内层循环反复把完整消息日志发给 LLM，直到模型给出 output：

    user → [plan → action → observation]* → output

消息日志只追加不修改，它就是模型的全部上下文。
"""

import json
from collections.abc import AsyncIterator

import structlog

from todo_agent.agent.prompts import build_system_prompt
from todo_agent.agent.schemas import AgentConfig, TurnEvent
from todo_agent.guardrails.reply_parser import ReplyParser
from todo_agent.guardrails.schemas import (
    ActionMessage,
    ObservationMessage,
    OutputMessage,
    PlanMessage,
    UserMessage,
)
from todo_agent.llm.client import LLMClient
from todo_agent.tools.registry import ToolRegistry

log = structlog.get_logger()

DEGRADED_REPLY = "Sorry, I could not finish that request. Please try rephrasing it or splitting it into smaller steps."


class TodoAgent:
    """对话循环：消息日志 + Think → Act → Observe"""

    def __init__(
        self,
        llm: LLMClient,
        tool_registry: ToolRegistry,
        config: AgentConfig | None = None,
    ):
        self.llm = llm
        self.tool_registry = tool_registry
        self.config = config or AgentConfig.from_settings()
        self.parser = ReplyParser()
        self.system_prompt = build_system_prompt(tool_registry.catalog())
        self.messages: list[dict] = []
        self.reset()

    def reset(self) -> None:
        """开启新会话：日志只保留 system prompt"""
        self.messages = [{"role": "system", "content": self.system_prompt}]

    async def respond(self, user_input: str) -> str:
        """执行一轮对话，返回最终回答文本"""
        reply = ""
        async for event in self.run_turn(user_input):
            if event.kind == "output":
                reply = event.data
        return reply

    async def run_turn(self, user_input: str) -> AsyncIterator[TurnEvent]:
        """
        执行一轮对话，逐个 yield 中间事件，最后一个事件总是 output。

        LLMError / ReplyParseError / InvalidToolCallError / 数据库异常不在此处兜底，
        直接向上抛；失败时日志保留到出错那一刻（模型原始回复已追加）。
        """
        self._append("user", UserMessage(user=user_input).to_content())

        for step in range(self.config.max_steps):
            response = await self.llm.chat(messages=self.messages, model=self.config.model)
            # 先原样追加模型回复，再解析
            self._append("assistant", response.content)
            message = self.parser.parse(response.content)

            log.debug("模型回复", step=step, type=message.type, tokens=response.total_tokens)

            if isinstance(message, OutputMessage):
                yield TurnEvent(kind="output", step=step, data=message.output, usage=response.usage)
                return

            if isinstance(message, ActionMessage):
                yield TurnEvent(
                    kind="action",
                    step=step,
                    data={"function": message.function, "input": message.input},
                    usage=response.usage,
                )
                observation = await self.tool_registry.execute(message.function, message.input)
                self._append(
                    self.config.observation_role,
                    ObservationMessage(observation=observation).to_content(),
                )
                yield TurnEvent(kind="observation", step=step, data=observation)
                continue

            if isinstance(message, PlanMessage):
                yield TurnEvent(kind="plan", step=step, data=message.plan, usage=response.usage)
                continue

            # 模型复述了 user / observation 消息：不执行任何动作，继续下一步
            log.debug("忽略非终止消息", step=step, type=message.type)

        log.warning("达到最大步数仍未给出回答", max_steps=self.config.max_steps)
        yield TurnEvent(
            kind="output",
            step=self.config.max_steps,
            data=DEGRADED_REPLY,
            is_degraded=True,
        )

    def _append(self, role: str, content: str) -> None:
        self.messages.append({"role": role, "content": content})

    def dump_messages(self) -> str:
        """消息日志的可读快照（调试用）"""
        return json.dumps(self.messages, ensure_ascii=False, indent=2)
