"""
wirekit.utils.sql_loader
------------------------

SQL 文件读取工具，供 Database.exec_query_file 使用。

注意：
- 只处理传入路径，不关心目录结构；
- 禁止引用 wirekit.http / wirekit.db 下的任何内容。
"""

from __future__ import annotations

from pathlib import Path


def read_sql_file(path: str | Path, encoding: str = "utf-8") -> str:
    """
    读取单个 .sql 文件内容并返回去除首尾空白后的字符串。

    输入：
        path: .sql 文件路径（字符串或 Path）；
        encoding: 文本编码，默认 utf-8。
    输出：
        str: SQL 文本内容。
    异常：
        FileNotFoundError: 文件不存在时抛出；
        IsADirectoryError: 传入路径为目录时抛出；
        ValueError: 文件内容为空时抛出。
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"SQL 文件不存在：{file_path.absolute()}")
    if file_path.is_dir():
        raise IsADirectoryError(f"期望为文件但得到目录：{file_path.absolute()}")

    sql_text = file_path.read_text(encoding=encoding).strip()
    if not sql_text:
        raise ValueError(f"SQL 文件内容为空：{file_path.absolute()}")
    return sql_text
