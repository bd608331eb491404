"""
wirekit.utils.config_loader: 配置读取（YAML 文件、.env 文件与环境变量）。

禁止引用 wirekit.http / wirekit.db 下的任何内容。
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from dotenv import load_dotenv


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    读取 YAML 文件并返回字典。

    输入：
    - path: 文件路径，可为 str 或 Path。

    输出：
    - 解析得到的字典；若文件为空或顶层不是映射，返回空字典。

    异常：
    - FileNotFoundError: 路径不存在；
    - yaml.YAMLError: 解析失败时由 PyYAML 抛出。
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML 文件不存在：{path}")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def load_env_file(path: Optional[Union[str, Path]] = None) -> bool:
    """
    加载 .env 文件到进程环境变量，已存在的变量不会被覆盖。

    输入：
    - path: .env 路径；为 None 时使用当前工作目录下的 .env。

    输出：
    - 是否实际加载了文件（文件不存在时返回 False）。
    """
    env_path = Path(path) if path is not None else Path.cwd() / ".env"
    if not env_path.is_file():
        return False
    return load_dotenv(env_path, override=False)


def env(
    name: str,
    default: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """
    读取单个环境变量，未设置时返回 default。

    environ 为 None 时读取 os.environ；测试中可传入普通字典，避免修改进程环境。
    """
    source = os.environ if environ is None else environ
    val = source.get(name)
    if val is None:
        return default
    return val
