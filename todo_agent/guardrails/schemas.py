"""
对话消息 Schema：与 LLM 约定的五种 JSON 消息

    {"type": "user", "user": "..."}
    {"type": "plan", "plan": "..."}
    {"type": "action", "function": "createTodo", "input": "..."}
    {"type": "observation", "observation": ...}
    {"type": "output", "output": "..."}

按 type 字段做 discriminated union，解析时自动选择对应模型。
"""

import json
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class _MessageBase(BaseModel):
    # LLM 偶尔会多带字段（如 thought），忽略即可
    model_config = ConfigDict(extra="ignore")

    def to_content(self) -> str:
        """序列化为消息日志中的 content 字符串"""
        return self.model_dump_json()


class UserMessage(_MessageBase):
    type: Literal["user"] = "user"
    user: str


class PlanMessage(_MessageBase):
    type: Literal["plan"] = "plan"
    plan: str


class ActionMessage(_MessageBase):
    type: Literal["action"] = "action"
    function: str
    input: Any = None


class ObservationMessage(_MessageBase):
    type: Literal["observation"] = "observation"
    observation: Any


class OutputMessage(_MessageBase):
    type: Literal["output"] = "output"
    output: str

    @field_validator("output", mode="before")
    @classmethod
    def _stringify_output(cls, v: Any) -> Any:
        # 模型有时直接把数字、列表或对象放进 output
        if v is None or isinstance(v, str):
            return v
        return json.dumps(v, ensure_ascii=False)


AgentMessage = Annotated[
    Union[UserMessage, PlanMessage, ActionMessage, ObservationMessage, OutputMessage],
    Field(discriminator="type"),
]

agent_message_adapter: TypeAdapter[AgentMessage] = TypeAdapter(AgentMessage)
