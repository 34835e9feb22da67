"""
对话轮次上下文：每轮生成 turn_id 并绑定到 structlog contextvars
"""

import uuid

import structlog


def new_turn_id() -> str:
    """生成新的 turn_id（取 uuid 前 8 位，控制台里好读）"""
    return str(uuid.uuid4())[:8]


def bind_turn(turn_id: str | None = None) -> str:
    """开启新轮次，后续所有日志自动带 turn_id；返回本轮 turn_id"""
    turn_id = turn_id or new_turn_id()
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(turn_id=turn_id)
    return turn_id
