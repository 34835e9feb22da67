"""
工具抽象基类

BaseTool 强制约束：
1. name / description / params_model — 定义工具签名（Pydantic 生成，杜绝手写出错）
2. execute — 返回可 JSON 序列化的结果，作为 observation 回传给 LLM

LLM 的 action 消息只有一个 input 字段，ToolRegistry 负责把它绑定到 params_model 上。
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel


class BaseTool(ABC):
    """工具抽象基类，所有工具必须继承"""

    @property
    @abstractmethod
    def name(self) -> str:
        """工具唯一名称（LLM 在 action.function 中引用）"""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """工具描述（给 LLM 看）"""
        ...

    @property
    @abstractmethod
    def params_model(self) -> type[BaseModel]:
        """参数 Pydantic Model，用于生成签名和校验入参"""
        ...

    @abstractmethod
    async def execute(self, args: dict) -> Any:
        """执行工具，返回 observation（必须可 JSON 序列化）"""
        ...

    def signature(self) -> str:
        """生成 prompt 中展示的函数签名，如 createTodo(todo: string)"""
        json_schema = self.params_model.model_json_schema()
        params = ", ".join(
            f"{key}: {prop.get('type', 'any')}"
            for key, prop in json_schema.get("properties", {}).items()
        )
        return f"{self.name}({params})"

    def catalog_line(self) -> str:
        """工具目录中的一行"""
        return f"- {self.signature()}: {self.description}"
