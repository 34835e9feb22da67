"""
数据库层：异步引擎、会话工厂、ORM 模型与迁移
"""
