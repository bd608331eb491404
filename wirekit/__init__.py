"""
wirekit: 出站 HTTP 请求与关系型数据库访问的基础工具。

- wirekit.http：请求构造、编码与发送；
- wirekit.db：参数化执行 SQL，返回受影响行数或 DataFrame；
- wirekit.utils：配置与 SQL 文件读取。
"""

__version__ = "0.1.0"
