"""
wirekit.db.config
-----------------

数据库连接配置。

设计原则：
- 配置通过 DbConfig 显式传入 Database，不在查询时读取全局状态；
- 环境变量 / .env / YAML 只在构造 DbConfig 时读取一次。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from sqlalchemy.engine import URL, make_url

from wirekit.logger import get_logger
from wirekit.utils.config_loader import env, load_env_file, load_yaml

_logger = get_logger(__name__)

DEFAULT_DRIVERNAME = "mysql+pymysql"


@dataclass
class DbConfig:
    """
    数据库连接配置对象。

    输入：
        connection_string: 完整连接串（SQLAlchemy URL），设置后忽略其余字段；
        drivername: SQLAlchemy 方言+驱动，例如 "mysql+pymysql"、"sqlite"；
        host / port / database / username / password: 分项连接信息；
        query: 追加到 URL 上的连接参数，如 {"charset": "utf8mb4"}。

    输出：
        无，作为 Database 的构造参数使用。
    """

    connection_string: Optional[str] = None
    drivername: str = DEFAULT_DRIVERNAME
    host: Optional[str] = "127.0.0.1"
    port: Optional[int] = None
    database: Optional[str] = None
    username: Optional[str] = "root"
    password: Optional[str] = ""
    query: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(
        cls,
        env_file: Optional[Union[str, Path]] = None,
        environ: Optional[Mapping[str, str]] = None,
        drivername: str = DEFAULT_DRIVERNAME,
    ) -> "DbConfig":
        """
        从环境变量构造配置。

        输入：
            env_file: .env 文件路径；为 None 时尝试当前目录下的 .env；
            environ: 变量来源；为 None 时先加载 .env 再读取 os.environ，
                     传入字典时不触碰进程环境（便于测试）；
            drivername: 未设置 DB_DRIVER 时使用的驱动。
        输出：
            DbConfig。CONNECTION_STRING 优先，其次 DB_HOST / DB_PORT / DB_DATABASE /
            DB_USERNAME / DB_PASSWORD。
        异常：
            ValueError: DB_PORT 不是整数时抛出。
        """
        if environ is None:
            load_env_file(env_file)

        port_text = env("DB_PORT", environ=environ)
        port: Optional[int] = None
        if port_text:
            try:
                port = int(port_text)
            except ValueError as exc:
                msg = f"环境变量 DB_PORT 不是合法端口号：{port_text!r}"
                _logger.error(msg)
                raise ValueError(msg) from exc

        return cls(
            connection_string=env("CONNECTION_STRING", environ=environ) or None,
            drivername=env("DB_DRIVER", environ=environ) or drivername,
            host=env("DB_HOST", "127.0.0.1", environ=environ),
            port=port,
            database=env("DB_DATABASE", environ=environ),
            username=env("DB_USERNAME", "root", environ=environ),
            password=env("DB_PASSWORD", "", environ=environ),
        )

    @classmethod
    def from_mapping(cls, cfg: Mapping[str, Any]) -> "DbConfig":
        """
        根据 load_yaml 解析出的字典构造配置，支持 {"db": {...}} 或平铺字段。

        异常：
            KeyError: 出现未知字段时抛出，避免拼写错误被静默忽略。
        """
        section = cfg.get("db", cfg) or {}
        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(section) - known)
        if unknown:
            raise KeyError(f"数据库配置中存在未知字段：{', '.join(unknown)}")

        values = dict(section)
        if values.get("port") is not None:
            values["port"] = int(values["port"])
        values["query"] = dict(values.get("query") or {})
        return cls(**values)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "DbConfig":
        """
        读取 YAML 配置文件（如 configs/db_local.yaml）并构造配置，字段规则同 from_mapping。

        异常：
            FileNotFoundError: 文件不存在时由 load_yaml 抛出。
        """
        return cls.from_mapping(load_yaml(path))

    def url(self) -> URL:
        """
        生成 SQLAlchemy URL。

        异常：
            ValueError: 未提供连接串且未指定 database 时抛出。
        """
        if self.connection_string:
            return make_url(self.connection_string)
        if not self.database:
            msg = "未提供 CONNECTION_STRING，且未配置 DB_DATABASE，无法构造数据库连接串。"
            _logger.error(msg)
            raise ValueError(msg)
        return URL.create(
            drivername=self.drivername,
            username=self.username or None,
            password=self.password or None,
            host=self.host or None,
            port=self.port,
            database=self.database,
            query=self.query,
        )
