"""
控制台交互入口：通过自然语言管理 Todo 列表

运行方式：
    todo-agent
    python -m todo_agent

支持命令：
    /new      — 开启新会话（清空对话上下文，Todo 数据不受影响）
    /debug    — 切换中间步骤（plan / action / observation）显示
    /history  — 打印当前消息日志
    /quit     — 退出
"""

import asyncio
import json
import sys
import traceback

import structlog
from prompt_toolkit import PromptSession

from todo_agent.agent import AgentConfig, TodoAgent, TurnEvent
from todo_agent.config import get_settings
from todo_agent.db.engine import create_engine_from_settings, create_session_factory, init_db
from todo_agent.llm import LLMClient
from todo_agent.observability import bind_turn, setup_logging
from todo_agent.todo import TodoStore
from todo_agent.tools.builtin_tools import create_builtin_registry

log = structlog.get_logger()

PROMPT = ">> "


def _print_event(event: TurnEvent) -> None:
    """调试模式下打印中间步骤"""
    if event.kind == "plan":
        print(f"\033[90m  ── plan: {event.data}\033[0m")
    elif event.kind == "action":
        args = json.dumps(event.data.get("input"), ensure_ascii=False)
        print(f"\033[90m  ── action: {event.data.get('function')}({args})\033[0m")
    elif event.kind == "observation":
        preview = json.dumps(event.data, ensure_ascii=False, default=str)
        print(f"\033[90m  ── observation: {preview[:500]}\033[0m")


async def chat_once(agent: TodoAgent, message: str, show_debug: bool = False) -> str:
    """执行一轮完整对话，返回回复文本；调试模式下打印中间步骤和本轮用量"""
    turn_id = bind_turn()
    reply = ""
    tokens = 0
    steps = 0
    async for event in agent.run_turn(message):
        tokens += event.usage.get("total_tokens", 0)
        if event.kind == "output":
            reply = event.data
            # 降级回答不对应一次 LLM 调用
            steps = event.step if event.is_degraded else event.step + 1
            if event.is_degraded and show_debug:
                print("\033[93m  ⚠ 达到最大步数，已降级回答\033[0m")
        elif show_debug:
            _print_event(event)
    if show_debug:
        print(f"\033[90m  ── turn={turn_id} | steps={steps} | tokens={tokens} ──\033[0m")
    return reply


async def main() -> int:
    """交互式对话主循环"""
    settings = get_settings()
    setup_logging(env=settings.ENV, level=settings.LOG_LEVEL)

    # ── Warm-up：Fail Fast，数据库不可用时拒绝启动 ──
    engine = create_engine_from_settings(settings)
    try:
        await init_db(engine, create_tables=settings.DB_AUTO_CREATE)
    except Exception as e:
        log.error("数据库初始化失败", error=str(e))
        print(f"\033[31m数据库不可用: {e}\033[0m", file=sys.stderr)
        await engine.dispose()
        return 1

    store = TodoStore(create_session_factory(engine))
    agent = TodoAgent(
        llm=LLMClient(),
        tool_registry=create_builtin_registry(store),
        config=AgentConfig.from_settings(),
    )
    show_debug = False
    pt_session = PromptSession()

    print("=" * 60)
    print("  Todo Agent — 用自然语言管理你的 Todo 列表")
    print("  命令: /new (新会话) | /debug (切换调试) | /history (消息日志) | /quit (退出)")
    print("=" * 60)

    try:
        while True:
            try:
                user_input = (await pt_session.prompt_async(PROMPT)).strip()
            except (EOFError, KeyboardInterrupt):
                print("\n再见！")
                break

            if not user_input:
                continue

            # 控制台命令
            if user_input == "/quit":
                print("再见！")
                break
            elif user_input == "/new":
                agent.reset()
                print("\033[90m  新会话已开启\033[0m\n")
                continue
            elif user_input == "/debug":
                show_debug = not show_debug
                print(f"\033[90m  调试信息: {'开启' if show_debug else '关闭'}\033[0m\n")
                continue
            elif user_input == "/history":
                print(agent.dump_messages())
                continue

            # 执行对话：单轮失败不退出，回到提示符
            try:
                reply = await chat_once(agent, user_input, show_debug)
                print(f"🤖: {reply}")
            except (KeyboardInterrupt, asyncio.CancelledError):
                # 回答途中 Ctrl-C：放弃本轮，正常退出
                log.info("对话被中断")
                print("\n再见！")
                break
            except Exception as e:
                log.error("对话轮次失败", error=str(e), error_type=type(e).__name__)
                print(f"\n\033[31m错误: {e}\033[0m\n")
                if show_debug:
                    traceback.print_exc()
    finally:
        await engine.dispose()

    return 0


def run() -> None:
    """console_scripts 入口"""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
