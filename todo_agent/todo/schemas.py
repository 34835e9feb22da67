"""
Todo 读模型

TodoRecord 是 TodoStore 对外返回的结构，与 ORM 对象解耦；
model_dump(mode="json") 的结果（时间戳为 ISO-8601）直接作为 observation 回传给 LLM。
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class TodoRecord(BaseModel):
    """单个 Todo 条目"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    text: str
    created_at: datetime
    updated_at: datetime
