"""
wirekit.logger
--------------

统一日志入口：所有模块通过 get_logger(__name__) 获取 logger。

- 所有 logger 挂在 "wirekit" 命名空间下；
- 本库只在 "wirekit" logger 上挂 NullHandler，不设置级别，
  输出格式、级别与处理器由调用方的日志配置决定。
"""

from __future__ import annotations

import logging

_ROOT_NAME = "wirekit"

logging.getLogger(_ROOT_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    获取 wirekit 命名空间下的 logger。

    输入：
        name: 模块名，通常传 __name__；不以 "wirekit" 开头时自动挂到其下。
    输出：
        logging.Logger 实例。
    """
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + "."):
        name = f"{_ROOT_NAME}.{name}"
    return logging.getLogger(name)
