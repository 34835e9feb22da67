"""
护栏层：LLM 回复的修复与校验
"""

from todo_agent.guardrails.reply_parser import ReplyParseError, ReplyParser
from todo_agent.guardrails.schemas import (
    ActionMessage,
    AgentMessage,
    ObservationMessage,
    OutputMessage,
    PlanMessage,
    UserMessage,
)

__all__ = [
    "ActionMessage",
    "AgentMessage",
    "ObservationMessage",
    "OutputMessage",
    "PlanMessage",
    "ReplyParseError",
    "ReplyParser",
    "UserMessage",
]
