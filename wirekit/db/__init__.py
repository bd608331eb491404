"""
wirekit.db: 关系型数据库访问门面（基于 SQLAlchemy，结果以 pandas.DataFrame 返回）。

注意：
- 禁止引用 wirekit.http 下的任何内容；
- 不直接读取全局配置，由调用方构造 DbConfig 注入。
"""

from __future__ import annotations

from .config import DbConfig
from .database import Database

__all__ = ["Database", "DbConfig"]
