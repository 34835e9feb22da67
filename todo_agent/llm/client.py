"""
LLM 客户端：LiteLLM 之上的 JSON 模式对话调用

Todo Agent 与模型之间只有一种交互：把完整消息日志发过去，要求模型回一个 JSON 对象。
因此 chat() 默认就是 JSON 模式；采样参数交给供应商默认值。

供应商异常按 _PROVIDER_ERRORS 映射为 LLMError 向上抛，由控制台决定如何展示。
"""

from dataclasses import dataclass, field

import structlog
from litellm import acompletion
from litellm.exceptions import (
    APIConnectionError,
    APIError,
    AuthenticationError,
    RateLimitError,
    Timeout,
)

from todo_agent.config import get_settings

log = structlog.get_logger()

JSON_MODE = {"type": "json_object"}

# (异常类型, 日志级别, 面向用户的说明)，按顺序匹配，子类必须排在父类前面
_PROVIDER_ERRORS: tuple[tuple[type[Exception], str, str], ...] = (
    (AuthenticationError, "error", "LLM 认证失败，请检查 LLM_API_KEY / OPENAI_API_KEY"),
    (RateLimitError, "warning", "LLM 请求限流，请稍后重试"),
    (Timeout, "warning", "LLM 调用超时"),
    (APIConnectionError, "error", "LLM 服务连接失败"),
    (APIError, "error", "LLM API 返回错误"),
)


class LLMError(Exception):
    """LLM 调用失败的应用级异常"""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


@dataclass
class LLMResponse:
    """一次 JSON 模式调用的结果：content 是模型原样返回的文本，由 ReplyParser 解析"""

    content: str
    model: str
    usage: dict = field(default_factory=dict)
    finish_reason: str = "stop"

    @property
    def total_tokens(self) -> int:
        return self.usage.get("total_tokens", 0)


def _usage_of(response) -> dict:
    usage = getattr(response, "usage", None)
    if not usage:
        return {"prompt_tokens": 0, "completion_tokens": 0, "total_tokens": 0}
    return {
        "prompt_tokens": usage.prompt_tokens or 0,
        "completion_tokens": usage.completion_tokens or 0,
        "total_tokens": usage.total_tokens or 0,
    }


def _wrap_error(e: Exception, model: str) -> LLMError:
    """把供应商异常翻译成 LLMError 并按严重程度记日志"""
    for exc_type, level, reason in _PROVIDER_ERRORS:
        if isinstance(e, exc_type):
            getattr(log, level)(reason, model=model, error=str(e))
            return LLMError(f"{reason}: {e}", cause=e)
    log.error("LLM 未知异常", model=model, error=str(e), exc_info=True)
    return LLMError(f"LLM 调用异常: {e}", cause=e)


class LLMClient:
    """Todo Agent 的模型调用入口"""

    def __init__(
        self,
        default_model: str | None = None,
        api_key: str | None = None,
        api_base: str | None = None,
        timeout: int | None = None,
    ):
        settings = get_settings()
        self.default_model = default_model or settings.LLM_DEFAULT_MODEL
        # 凭证只在显式配置时透传，否则让 litellm 自己读 OPENAI_API_KEY 等环境变量
        self._credentials = {
            k: v
            for k, v in (
                ("api_key", api_key or settings.LLM_API_KEY),
                ("api_base", api_base or settings.LLM_API_BASE),
            )
            if v
        }
        self.timeout = timeout or settings.LLM_TIMEOUT

    async def chat(
        self,
        messages: list[dict],
        model: str | None = None,
        response_format: dict | None = JSON_MODE,
    ) -> LLMResponse:
        """
        发送完整消息日志，返回模型回复。

        Args:
            messages: 对话循环维护的消息日志（OpenAI 格式）
            model: 覆盖默认模型
            response_format: 默认 JSON 模式；传 None 则返回自由文本
        """
        use_model = model or self.default_model
        request: dict = {
            "model": use_model,
            "messages": messages,
            "timeout": self.timeout,
            **self._credentials,
        }
        if response_format:
            request["response_format"] = response_format

        log.debug("LLM 调用开始", model=use_model, msg_count=len(messages))
        try:
            response = await acompletion(**request)
        except Exception as e:
            raise _wrap_error(e, use_model) from e

        choice = response.choices[0]
        result = LLMResponse(
            content=choice.message.content or "",
            model=response.model or use_model,
            usage=_usage_of(response),
            finish_reason=choice.finish_reason or "stop",
        )
        log.debug(
            "LLM 调用完成",
            model=result.model,
            tokens=result.total_tokens,
            finish_reason=result.finish_reason,
        )
        return result
