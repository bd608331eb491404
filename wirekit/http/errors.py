"""
wirekit.http.errors: HTTP 请求构造与发送过程中的异常类型。

- InvalidRequestError / UnsupportedContentTypeError 均在发送前抛出，不产生任何网络 I/O；
- RequestDispatchError 包装传输层异常，只尝试一次，不重试。
"""

from __future__ import annotations

from typing import Optional


class HttpClientError(Exception):
    """wirekit.http 下所有异常的基类。"""


class InvalidRequestError(HttpClientError, ValueError):
    """请求配置不完整或不合法（如未设置 HTTP 方法）。"""


class UnsupportedContentTypeError(InvalidRequestError):
    """请求体数据形态与声明的 Content-Type 不匹配。"""

    def __init__(self, content_type: str, data_type: type) -> None:
        self.content_type = content_type
        self.data_type = data_type
        super().__init__(
            f"Content-Type {content_type!r} 不支持 {data_type.__name__} 类型的请求体数据。"
        )


class RequestDispatchError(HttpClientError, RuntimeError):
    """发送请求时发生传输层错误（DNS、连接被拒、超时、协议错误等）。"""

    def __init__(self, method: str, cause: Optional[BaseException] = None, reason: Optional[str] = None) -> None:
        self.method = method
        self.cause = cause
        self.reason = reason or (str(cause) if cause is not None else "未知错误")
        super().__init__(f"发送 {method} 请求时发生错误：{self.reason}")
