# wirekit.utils: 通用工具（配置加载、环境变量、SQL 文件读取）
# 禁止引用 wirekit.http / wirekit.db 下的任何内容

from wirekit.utils.config_loader import env, load_env_file, load_yaml
from wirekit.utils.sql_loader import read_sql_file

__all__ = ["env", "load_env_file", "load_yaml", "read_sql_file"]
