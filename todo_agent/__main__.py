from todo_agent.console import run

run()
