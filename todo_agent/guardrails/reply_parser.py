"""
LLM 回复解析：原始文本 → 结构化 AgentMessage

流程：
1. 去除 Markdown 代码块标记
2. 从第一个 "{" 开始取出第一个完整 JSON 对象（模型偶尔一次输出多条消息）
3. 标准 JSON 解析失败时交给 json-repair 修复
4. Pydantic discriminated union 校验

任一步失败 → ReplyParseError，由调用方决定是否中止本轮对话。
"""

import json

import structlog
from json_repair import repair_json
from pydantic import ValidationError

from todo_agent.guardrails.schemas import AgentMessage, agent_message_adapter

log = structlog.get_logger()

_decoder = json.JSONDecoder()


class ReplyParseError(Exception):
    """LLM 回复无法解析为合法的对话消息"""

    def __init__(self, raw: str, cause: Exception | None = None):
        super().__init__(f"无法解析 LLM 回复: {cause}")
        self.raw = raw
        self.cause = cause


class ReplyParser:
    """把 LLM 原始回复解析为 AgentMessage"""

    def parse(self, raw: str) -> AgentMessage:
        try:
            data = self.repair(raw)
            return agent_message_adapter.validate_python(data)
        except (ValueError, ValidationError) as e:
            log.warning("LLM 回复解析失败", raw_preview=raw[:200], error=str(e))
            raise ReplyParseError(raw, cause=e) from e

    def repair(self, raw: str) -> dict:
        """
        Raises:
            ValueError: 修复后仍然不是 JSON 对象
        """
        cleaned = self._strip_markdown(raw)
        start = cleaned.find("{")
        if start == -1:
            raise ValueError("回复中没有 JSON 对象")
        cleaned = cleaned[start:]

        try:
            data, _end = _decoder.raw_decode(cleaned)
        except json.JSONDecodeError:
            data = repair_json(cleaned, return_objects=True)
            log.debug("LLM 回复经 json-repair 修复", raw_preview=raw[:200])

        if not isinstance(data, dict):
            raise ValueError(f"期望 JSON 对象，实际得到 {type(data).__name__}")
        return data

    @staticmethod
    def _strip_markdown(raw: str) -> str:
        """去除 Markdown 代码块标记"""
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = [line for line in cleaned.split("\n") if not line.strip().startswith("```")]
            cleaned = "\n".join(lines)
        return cleaned
