"""
todo-agent：通过自然语言管理 Todo 列表的命令行对话 Agent
"""

__version__ = "0.1.0"
