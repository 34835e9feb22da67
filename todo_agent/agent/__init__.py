"""
Todo Agent 对话循环

组件：
- engine: 对话循环（消息日志 + LLM ⇄ 工具）
- prompts: System Prompt（消息协议 + 工具目录）
- schemas: 运行时配置与轮次事件
"""

from todo_agent.agent.engine import TodoAgent
from todo_agent.agent.schemas import AgentConfig, TurnEvent

__all__ = ["AgentConfig", "TodoAgent", "TurnEvent"]
