"""
对话循环数据结构定义
"""

from dataclasses import dataclass, field
from typing import Any, Literal

from todo_agent.config import get_settings


@dataclass
class AgentConfig:
    """对话循环运行时配置，从全局 Settings 加载"""

    max_steps: int = 10
    observation_role: str = "developer"
    model: str | None = None

    @classmethod
    def from_settings(cls) -> "AgentConfig":
        """从全局 Settings 加载，可通过环境变量 / .env 覆盖"""
        s = get_settings()
        return cls(
            max_steps=s.AGENT_MAX_STEPS,
            observation_role=s.AGENT_OBSERVATION_ROLE,
            model=s.LLM_DEFAULT_MODEL,
        )


@dataclass
class TurnEvent:
    """
    单轮对话中的一个事件

    kind:
    - plan:        模型的规划（data = plan 文本）
    - action:      模型请求调用工具（data = {"function": ..., "input": ...}）
    - observation: 工具执行结果（data = observation）
    - output:      最终回答（data = 回答文本），每轮恰好一个且总是最后一个
    """

    kind: Literal["plan", "action", "observation", "output"]
    step: int
    data: Any = None
    is_degraded: bool = False
    usage: dict = field(default_factory=dict)
