"""
LLM 调用层
"""

from todo_agent.llm.client import JSON_MODE, LLMClient, LLMError, LLMResponse

__all__ = ["JSON_MODE", "LLMClient", "LLMError", "LLMResponse"]
