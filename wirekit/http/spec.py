"""
wirekit.http.spec
-----------------

HTTP 请求的数据模型：

- RequestSpec：请求的逻辑描述（方法、URL、查询片段、请求头、请求体数据、Content-Type）；
- EncodedRequest：已编码、可直接发送的请求（完整 URL、逐行请求头、请求体字节）；
- HttpResult：(status_code, body) 结果对。

所有对象都只在单次调用内存在，不跨调用共享。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, NamedTuple, Optional, Tuple, Union

DEFAULT_CONTENT_TYPE = "application/x-www-form-urlencoded"

BodyData = Union[Mapping[str, str], str]


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"

    @property
    def supports_body(self) -> bool:
        """只有 POST / PUT 会携带请求体，其余方法忽略传入的数据。"""
        return self in (HttpMethod.POST, HttpMethod.PUT)


class ContentType(str, Enum):
    """内置编码方式对应的 Content-Type；其余取值按原始字符串透传。"""

    JSON = "application/json"
    FORM = DEFAULT_CONTENT_TYPE

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ContentType"]:
        # 精确匹配，不解析 "; charset=..." 等 MIME 参数
        for member in cls:
            if member.value == value:
                return member
        return None


def join_query(url: str, parameters: Optional[Tuple[str, ...]] = None) -> str:
    """
    将调用方预先编码好的查询片段拼到 URL 上。

    输入：
        url: 基础 URL；
        parameters: 形如 "key=value" 的片段序列，原样拼接，不做转义与校验。
    输出：
        片段非空时返回 url + "?" + "&".join(parameters)，否则原样返回 url。
    """
    if not parameters:
        return url
    return url + "?" + "&".join(parameters)


@dataclass(frozen=True)
class RequestSpec:
    method: Optional[HttpMethod]
    url: str
    parameters: Tuple[str, ...] = ()
    headers: Dict[str, str] = field(default_factory=dict)
    data: Optional[BodyData] = None
    content_type: str = DEFAULT_CONTENT_TYPE

    @property
    def full_url(self) -> str:
        return join_query(self.url, self.parameters)

    @property
    def has_body(self) -> bool:
        return self.method is not None and self.method.supports_body and self.data is not None


@dataclass(frozen=True)
class EncodedRequest:
    """
    已编码的请求。

    headers 按行保存 (name, value)，同名请求头多次添加会保留多行，不做去重。
    """

    method: HttpMethod
    url: str
    headers: Tuple[Tuple[str, str], ...] = ()
    body: Optional[bytes] = None

    def header_values(self, name: str) -> List[str]:
        key = name.lower()
        return [value for header, value in self.headers if header.lower() == key]

    @property
    def content_type(self) -> Optional[str]:
        values = self.header_values("Content-Type")
        return values[0] if values else None


class HttpResult(NamedTuple):
    status_code: int
    body: str
