"""
wirekit.http.builder
--------------------

RequestBuilder：把 RequestSpec 校验并编码为 EncodedRequest。

流程为单向线性：配置 -> validate -> encode -> 产出 EncodedRequest。
builder 只能 build 一次，build 之后不可再修改或复用。

请求体编码规则（按 Content-Type 字符串精确匹配）：
- application/json：任意可 JSON 序列化的数据 -> JSON 文本；
- application/x-www-form-urlencoded：键值映射 -> key=value&...（百分号编码）；
- 其他取值：字符串数据原样以 UTF-8 发送，映射等其他类型抛 UnsupportedContentTypeError。
"""

from __future__ import annotations

import json
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import urlencode

from wirekit.http.errors import InvalidRequestError, UnsupportedContentTypeError
from wirekit.http.spec import (
    DEFAULT_CONTENT_TYPE,
    BodyData,
    ContentType,
    EncodedRequest,
    HttpMethod,
    RequestSpec,
)
from wirekit.logger import get_logger

_logger = get_logger(__name__)

_CONTENT_TYPE_HEADER = "Content-Type"


class RequestBuilder:
    """
    可链式配置的请求构造器。

    输入：
        method: HTTP 方法（HttpMethod 或其字符串值，大小写不敏感）；
        url: 基础 URL；
        parameters: 预先编码好的查询片段（如 ["a=1", "b=2"]），可为空。
    输出：
        无（构造器）。通过 build() 得到 EncodedRequest。
    """

    def __init__(
        self,
        method: Optional[Union[HttpMethod, str]],
        url: str,
        parameters: Optional[Sequence[str]] = None,
    ) -> None:
        self._method = method
        self._url = url
        self._parameters: Tuple[str, ...] = tuple(parameters or ())
        self._headers: Dict[str, str] = {}
        self._extra_headers: List[Tuple[str, str]] = []
        self._data: Optional[BodyData] = None
        self._content_type: str = DEFAULT_CONTENT_TYPE
        self._built = False

    # ---------- 配置 ----------

    def with_headers(self, headers: Optional[Mapping[str, str]]) -> "RequestBuilder":
        """整体替换请求头映射（后写覆盖，不合并）。"""
        self._ensure_open()
        self._headers = dict(headers) if headers else {}
        return self

    def with_data(self, data: Optional[BodyData]) -> "RequestBuilder":
        self._ensure_open()
        self._data = data
        return self

    def with_content_type(self, content_type: Optional[str]) -> "RequestBuilder":
        self._ensure_open()
        self._content_type = content_type or DEFAULT_CONTENT_TYPE
        return self

    def add_header(self, name: str, value: str) -> "RequestBuilder":
        """追加一行请求头；同名多次追加会产生多行。"""
        self._ensure_open()
        self._extra_headers.append((name, value))
        return self

    def to_spec(self) -> RequestSpec:
        return RequestSpec(
            method=self._coerce_method(self._method) if self._method is not None else None,
            url=self._url,
            parameters=self._parameters,
            headers=dict(self._headers),
            data=self._data,
            content_type=self._content_type,
        )

    # ---------- 构造 ----------

    def build(self) -> EncodedRequest:
        """
        校验配置并产出 EncodedRequest。

        输出：
            EncodedRequest：完整 URL、逐行请求头、请求体字节（无请求体时为 None）。
        异常：
            InvalidRequestError: 方法未设置/不合法、URL 为空、builder 已被使用；
            UnsupportedContentTypeError: 请求体数据形态与 Content-Type 不匹配。
        """
        self._ensure_open()
        self._built = True

        spec = self.to_spec()
        headers = self._validate(spec)

        body: Optional[bytes] = None
        if spec.has_body:
            body = self._encode(spec.content_type, spec.data)

        return EncodedRequest(
            method=spec.method,
            url=spec.full_url,
            headers=tuple(headers),
            body=body,
        )

    def _validate(self, spec: RequestSpec) -> List[Tuple[str, str]]:
        if spec.method is None:
            raise InvalidRequestError("必须设置 HTTP 方法。")
        if not spec.url:
            raise InvalidRequestError("请求 URL 不能为空。")

        headers: List[Tuple[str, str]] = list(spec.headers.items())
        headers.extend(self._extra_headers)
        for name, value in headers:
            _check_header(name, value)

        if spec.has_body:
            has_content_type = any(name.lower() == _CONTENT_TYPE_HEADER.lower() for name, _ in headers)
            if not has_content_type:
                headers.append((_CONTENT_TYPE_HEADER, spec.content_type or DEFAULT_CONTENT_TYPE))
        return headers

    @staticmethod
    def _encode(content_type: str, data: BodyData) -> bytes:
        kind = ContentType.parse(content_type)

        if kind is ContentType.JSON:
            try:
                text = json.dumps(data, ensure_ascii=False, separators=(",", ":"))
            except (TypeError, ValueError) as exc:
                _logger.error("请求体无法序列化为 JSON：%s", exc)
                raise UnsupportedContentTypeError(content_type, type(data)) from exc
            return text.encode("utf-8")

        if kind is ContentType.FORM:
            if not isinstance(data, Mapping):
                raise UnsupportedContentTypeError(content_type, type(data))
            return urlencode([(str(k), str(v)) for k, v in data.items()]).encode("utf-8")

        if isinstance(data, str):
            return data.encode("utf-8")
        raise UnsupportedContentTypeError(content_type, type(data))

    @staticmethod
    def _coerce_method(method: Union[HttpMethod, str]) -> HttpMethod:
        if isinstance(method, HttpMethod):
            return method
        try:
            return HttpMethod(str(method).upper())
        except ValueError as exc:
            raise InvalidRequestError(f"不支持的 HTTP 方法：{method!r}") from exc

    def _ensure_open(self) -> None:
        if self._built:
            raise InvalidRequestError("RequestBuilder 已执行过 build()，不能再次配置或构造。")


def _check_header(name: str, value: str) -> None:
    # http.client 以 latin-1 编码请求头，无法编码的字符在发送前拒绝
    for part in (name, value):
        if not isinstance(part, str):
            raise InvalidRequestError(f"请求头 {name!r} 的名称与取值必须是字符串。")
        try:
            part.encode("latin-1")
        except UnicodeEncodeError as exc:
            raise InvalidRequestError(
                f"请求头 {name!r} 含有无法以 latin-1 编码的字符，请先自行编码（如百分号编码）。"
            ) from exc
