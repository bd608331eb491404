"""
wirekit.db.database
-------------------

基于 SQLAlchemy 的关系型数据库访问门面。

- exec_command：执行 INSERT/UPDATE/DELETE 等语句，返回受影响行数；
- exec_query：执行查询并以 pandas.DataFrame 返回结果表；
- 每次操作单独打开连接，无论成功与否都会关闭（不使用连接池）；
- 驱动层异常不做转换、不吞掉：SQLAlchemy 会把 DBAPI 驱动异常包装为
  sqlalchemy.exc.DBAPIError 的子类（如 OperationalError、IntegrityError），
  原始驱动异常保存在其 .orig 属性上，本模块原样抛出该 SQLAlchemy 异常。

SQL 中的参数使用 :name 占位符，parameters 为 {name: 值} 字典。
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import pandas as pd
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from wirekit.db.config import DbConfig
from wirekit.logger import get_logger
from wirekit.utils.sql_loader import read_sql_file

_logger = get_logger(__name__)


class Database:
    """
    数据库门面。

    输入：
        config: DbConfig；为 None 时在首次连接时通过 DbConfig.from_env() 读取环境变量。
    输出：
        无（构造器）。可作为上下文管理器使用，退出时释放 engine。
    异常：
        exec_command / exec_query 失败时抛出 sqlalchemy.exc.DBAPIError 子类，
        驱动原始异常见 exc.orig；连接在抛出前已关闭。
    """

    def __init__(self, config: Optional[DbConfig] = None) -> None:
        self._config = config
        self._engine: Optional[Engine] = None

    def connect(self, connection_string: Optional[str] = None) -> Engine:
        """
        创建（或重建）engine。

        输入：
            connection_string: 显式连接串；为空时使用构造时传入的配置或环境变量。
        输出：
            sqlalchemy Engine。
        """
        if connection_string:
            url: Any = connection_string
        else:
            if self._config is None:
                self._config = DbConfig.from_env()
            url = self._config.url()

        if self._engine is not None:
            self._engine.dispose()
        self._engine = create_engine(url, poolclass=NullPool)
        return self._engine

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            return self.connect()
        return self._engine

    def exec_command(self, command: str, parameters: Optional[Mapping[str, Any]] = None) -> int:
        """
        在事务中执行一条语句并提交。

        输入：
            command: SQL 文本；
            parameters: 占位符参数字典，可为空。
        输出：
            int：受影响行数（驱动无法给出时为 -1）。
        """
        params: Dict[str, Any] = dict(parameters or {})
        _logger.debug("执行语句：%s，参数：%s", command, list(params))
        try:
            with self.engine.begin() as conn:
                result = conn.execute(text(command), params)
                return result.rowcount
        except SQLAlchemyError as exc:
            _logger.error("执行语句失败：%s", exc)
            raise

    def exec_query(self, query: str, parameters: Optional[Mapping[str, Any]] = None) -> pd.DataFrame:
        """
        执行查询并返回 DataFrame。

        输入：
            query: SQL 查询文本；
            parameters: 占位符参数字典，可为空。
        输出：
            pd.DataFrame：列名取自结果集；无数据时返回带列名的空表，
            语句不返回结果集时返回空 DataFrame。
        """
        params: Dict[str, Any] = dict(parameters or {})
        _logger.debug("执行查询：%s，参数：%s", query, list(params))
        try:
            with self.engine.connect() as conn:
                result = conn.execute(text(query), params)
                if not result.returns_rows:
                    return pd.DataFrame()
                columns = list(result.keys())
                rows = [tuple(row) for row in result.fetchall()]
                return pd.DataFrame(rows, columns=columns)
        except SQLAlchemyError as exc:
            _logger.error("执行查询失败：%s", exc)
            raise

    def exec_query_file(
        self,
        path: Union[str, Path],
        parameters: Optional[Mapping[str, Any]] = None,
    ) -> pd.DataFrame:
        """读取 .sql 文件并执行查询。"""
        return self.exec_query(read_sql_file(path), parameters)

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

