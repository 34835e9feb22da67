"""
工具注册中心：统一管理工具的注册、目录生成和执行分发

LLM 通过 action 消息点名工具：
    {"type": "action", "function": "createTodo", "input": "买牛奶"}
Registry 按名字查表，把 input 绑定到工具参数上再执行。
"""

import json
from typing import Any

import structlog
from pydantic import ValidationError

from todo_agent.tools.base import BaseTool

log = structlog.get_logger()


class InvalidToolCallError(Exception):
    """LLM 请求了不存在的工具，或入参无法通过校验"""

    def __init__(self, message: str, tool_name: str | None = None, cause: Exception | None = None):
        super().__init__(message)
        self.tool_name = tool_name
        self.cause = cause


class ToolRegistry:
    """工具注册中心"""

    def __init__(self):
        self._tools: dict[str, BaseTool] = {}

    def register(self, tool: BaseTool) -> None:
        """注册一个工具实例"""
        self._tools[tool.name] = tool
        log.debug("工具已注册", tool=tool.name)

    def has_tool(self, name: str) -> bool:
        return name in self._tools

    def catalog(self) -> str:
        """生成 system prompt 中的工具目录"""
        return "\n".join(tool.catalog_line() for tool in self._tools.values())

    def bind_input(self, name: str, tool_input: Any) -> dict:
        """
        把 action 的单个 input 绑定到工具参数并校验。

        - 无参数工具：忽略 input
        - 单参数工具：{字段名: input}
        - input 本身是 dict：当作关键字参数
        """
        tool = self._tools.get(name)
        if not tool:
            raise InvalidToolCallError("Invalid Tool Call.", tool_name=name)

        fields = list(tool.params_model.model_fields)
        if isinstance(tool_input, dict):
            raw_args = tool_input
        elif not fields:
            raw_args = {}
        else:
            raw_args = {fields[0]: tool_input}

        try:
            params = tool.params_model.model_validate(raw_args)
        except ValidationError as e:
            raise InvalidToolCallError(
                f"工具 {name} 参数无效: {e.errors(include_url=False)}",
                tool_name=name,
                cause=e,
            ) from e
        return params.model_dump()

    async def execute(self, name: str, tool_input: Any = None) -> Any:
        """
        执行工具，返回 observation。

        未知工具 / 参数无效 → InvalidToolCallError；
        工具内部异常（如数据库错误）记录日志后原样向上抛。
        """
        args = self.bind_input(name, tool_input)
        tool = self._tools[name]

        try:
            result = await tool.execute(args)
        except Exception as e:
            log.error("工具执行异常", tool=name, args=args, error=str(e), exc_info=True)
            raise

        log.info(
            "工具执行完成",
            tool=name,
            args=args,
            result_preview=json.dumps(result, ensure_ascii=False, default=str)[:200],
        )
        return result

    @property
    def tool_names(self) -> list[str]:
        """获取所有已注册工具名称"""
        return list(self._tools.keys())

    @property
    def tool_count(self) -> int:
        """已注册工具总数"""
        return len(self._tools)
