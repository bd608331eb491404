"""
wirekit.http.dispatcher
-----------------------

把 EncodedRequest 通过 requests 发送出去，返回 HttpResult(status_code, body)。

- 每次调用新建并关闭一个 requests.Session，不复用连接；
- 不设置超时，沿用传输层默认行为（包括重定向）；
- 只尝试一次，传输层异常统一包装为 RequestDispatchError。
"""

from __future__ import annotations

from typing import Dict, Tuple

import requests

from wirekit.http.errors import RequestDispatchError
from wirekit.http.spec import EncodedRequest, HttpResult
from wirekit.logger import get_logger

_logger = get_logger(__name__)


def _fold_headers(headers: Tuple[Tuple[str, str], ...]) -> Dict[str, str]:
    """
    将逐行请求头合并为 requests 可接受的字典。

    requests 每个请求头名只保留一个值，同名多行按出现顺序以 ", " 连接。
    名称比较大小写不敏感，保留首次出现时的写法。
    """
    folded: Dict[str, str] = {}
    names: Dict[str, str] = {}
    for name, value in headers:
        key = name.lower()
        if key in names:
            original = names[key]
            folded[original] = f"{folded[original]}, {value}"
        else:
            names[key] = name
            folded[name] = value
    return folded


def send(request: EncodedRequest) -> HttpResult:
    """
    发送单个请求并读取响应文本。

    输入：
        request: RequestBuilder.build() 产出的 EncodedRequest。
    输出：
        HttpResult：状态码与响应文本；4xx/5xx 同样正常返回，不抛异常。
    异常：
        RequestDispatchError: DNS、连接、超时、协议等传输层错误。
    """
    method = request.method.value
    _logger.debug("发送 %s 请求：%s", method, request.url)

    try:
        with requests.Session() as session:
            prepared = session.prepare_request(
                requests.Request(
                    method=method,
                    url=request.url,
                    headers=_fold_headers(request.headers),
                    data=request.body,
                )
            )
            settings = session.merge_environment_settings(prepared.url, {}, None, None, None)
            response = session.send(prepared, **settings)
            return HttpResult(response.status_code, response.text)
    except requests.RequestException as exc:
        msg = f"发送 {method} 请求失败：{request.url}，错误：{exc!s}"
        _logger.error(msg)
        raise RequestDispatchError(method, exc) from exc
    except (ValueError, OSError) as exc:
        # http.client / urllib3 内部抛出、未被 requests 包装的异常
        msg = f"发送 {method} 请求失败：{request.url}，错误：{exc!r}"
        _logger.error(msg)
        raise RequestDispatchError(method, exc) from exc
