"""
wirekit.http.request
--------------------

按 HTTP 方法划分的便捷入口：get / post / put / delete / options / trace。

每个入口都会：
1. 用 RequestBuilder 组装请求（查询片段原样拼到 URL 上）；
2. 调用 dispatcher.send 发送；
3. 返回 HttpResult(status_code, body)，可直接解包为 (状态码, 响应文本)。

只有 post / put 接收请求体数据与 Content-Type。
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence, Union

from wirekit.http.builder import RequestBuilder
from wirekit.http.dispatcher import send
from wirekit.http.spec import DEFAULT_CONTENT_TYPE, BodyData, HttpMethod, HttpResult

Headers = Optional[Mapping[str, str]]
Parameters = Optional[Sequence[str]]


def request(
    method: Union[HttpMethod, str],
    url: str,
    parameters: Parameters = None,
    data: Optional[BodyData] = None,
    headers: Headers = None,
    content_type: Optional[str] = DEFAULT_CONTENT_TYPE,
) -> HttpResult:
    """
    通用请求入口，各方法的便捷函数都委托到这里。

    输入：
        method: HTTP 方法；
        url: 基础 URL；
        parameters: 预先编码好的查询片段，如 ["a=1", "b=2"]；
        data: 请求体数据（映射或字符串），非 POST/PUT 时被忽略；
        headers: 请求头；
        content_type: 请求体 Content-Type，None 时使用默认的表单编码。
    输出：
        HttpResult(status_code, body)。
    异常：
        InvalidRequestError / UnsupportedContentTypeError: 发送前的校验失败；
        RequestDispatchError: 传输层错误。
    """
    builder = (
        RequestBuilder(method, url, parameters)
        .with_headers(headers)
        .with_data(data)
        .with_content_type(content_type)
    )
    return send(builder.build())


def get(url: str, parameters: Parameters = None, headers: Headers = None) -> HttpResult:
    return request(HttpMethod.GET, url, parameters, headers=headers)


def post(
    url: str,
    parameters: Parameters = None,
    data: Optional[BodyData] = None,
    headers: Headers = None,
    content_type: Optional[str] = DEFAULT_CONTENT_TYPE,
) -> HttpResult:
    return request(HttpMethod.POST, url, parameters, data, headers, content_type)


def put(
    url: str,
    parameters: Parameters = None,
    data: Optional[BodyData] = None,
    headers: Headers = None,
    content_type: Optional[str] = DEFAULT_CONTENT_TYPE,
) -> HttpResult:
    return request(HttpMethod.PUT, url, parameters, data, headers, content_type)


def delete(url: str, parameters: Parameters = None, headers: Headers = None) -> HttpResult:
    return request(HttpMethod.DELETE, url, parameters, headers=headers)


def options(url: str, parameters: Parameters = None, headers: Headers = None) -> HttpResult:
    return request(HttpMethod.OPTIONS, url, parameters, headers=headers)


def trace(url: str, parameters: Parameters = None, headers: Headers = None) -> HttpResult:
    return request(HttpMethod.TRACE, url, parameters, headers=headers)
