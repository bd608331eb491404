"""
wirekit.http: 出站 HTTP 请求的构造与发送（基于 requests）。

对外提供：
- get / post / put / delete / options / trace / request：便捷入口，返回 HttpResult；
- RequestBuilder：校验并编码请求；
- send：发送 EncodedRequest；
- 异常：InvalidRequestError、UnsupportedContentTypeError、RequestDispatchError。

注意：
- 禁止引用 wirekit.db 下的任何内容。
"""

from __future__ import annotations

from .builder import RequestBuilder
from .dispatcher import send
from .errors import (
    HttpClientError,
    InvalidRequestError,
    RequestDispatchError,
    UnsupportedContentTypeError,
)
from .request import delete, get, options, post, put, request, trace
from .spec import (
    DEFAULT_CONTENT_TYPE,
    ContentType,
    EncodedRequest,
    HttpMethod,
    HttpResult,
    RequestSpec,
)

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "ContentType",
    "EncodedRequest",
    "HttpClientError",
    "HttpMethod",
    "HttpResult",
    "InvalidRequestError",
    "RequestBuilder",
    "RequestDispatchError",
    "RequestSpec",
    "UnsupportedContentTypeError",
    "delete",
    "get",
    "options",
    "post",
    "put",
    "request",
    "send",
    "trace",
]
