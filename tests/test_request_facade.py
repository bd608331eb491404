"""
便捷入口测试：get/post/put/delete/options/trace 端到端（传输层已替换）。
"""
from __future__ import annotations

import json
from urllib.parse import parse_qs

import pytest
import requests

from wirekit.http import (
    HttpResult,
    InvalidRequestError,
    RequestDispatchError,
    UnsupportedContentTypeError,
    delete,
    get,
    options,
    post,
    put,
    request,
    trace,
)

from conftest import make_response


def test_get_appends_query_fragments(fake_send):
    get("http://h", ["a=1", "b=2"])
    assert fake_send.last.url == "http://h/?a=1&b=2"


def test_get_without_fragments_keeps_url(fake_send):
    get("http://h/path", [])
    assert fake_send.last.url == "http://h/path"


def test_post_json_end_to_end(fake_send):
    fake_send.response = make_response(201, '{"id":1}')
    result = post("http://example/api", None, {"name": "a"}, None, "application/json")
    assert result == (201, '{"id":1}')
    assert isinstance(result, HttpResult)
    sent = fake_send.last
    assert sent.method == "POST"
    assert sent.body == b'{"name":"a"}'
    assert sent.headers["Content-Type"] == "application/json"


def test_post_defaults_to_form_encoding(fake_send):
    post("http://h", data={"a": "1", "b": "2 x"})
    sent = fake_send.last
    assert sent.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert parse_qs(sent.body.decode("utf-8")) == {"a": ["1"], "b": ["2 x"]}


def test_put_with_raw_string(fake_send):
    put("http://h", data="plain", content_type="text/plain")
    sent = fake_send.last
    assert sent.method == "PUT"
    assert sent.body == b"plain"
    assert sent.headers["Content-Type"] == "text/plain"


def test_put_with_none_content_type_uses_default(fake_send):
    put("http://h", data={"k": "v"}, content_type=None)
    assert fake_send.last.headers["Content-Type"] == "application/x-www-form-urlencoded"


@pytest.mark.parametrize(
    "call, method",
    [(get, "GET"), (delete, "DELETE"), (options, "OPTIONS"), (trace, "TRACE")],
)
def test_bodyless_verbs(fake_send, call, method):
    fake_send.response = make_response(200, "done")
    status, body = call("http://h", ["q=1"], {"X-Req": "1"})
    assert (status, body) == (200, "done")
    sent = fake_send.last
    assert sent.method == method
    assert sent.body is None
    assert sent.headers["X-Req"] == "1"


def test_generic_request_ignores_data_for_get(fake_send):
    request("GET", "http://h", data={"a": "1"}, content_type="application/json")
    assert fake_send.last.body is None
    assert "Content-Type" not in fake_send.last.headers


def test_validation_error_raised_before_dispatch(fake_send):
    with pytest.raises(UnsupportedContentTypeError):
        post("http://h", data={"a": "1"}, content_type="text/csv")
    with pytest.raises(InvalidRequestError):
        post("http://h", data="a=1")
    assert fake_send.sent == []


def test_dispatch_failure_propagates(fake_send):
    fake_send.error = requests.ConnectionError("refused")
    with pytest.raises(RequestDispatchError) as excinfo:
        get("http://h")
    assert excinfo.value.method == "GET"


def test_post_json_string_is_serialized_as_json_string(fake_send):
    post("http://h", data='{"raw":true}', content_type="application/json")
    assert json.loads(fake_send.last.body) == '{"raw":true}'


def test_non_latin1_header_fails_typed_before_dispatch(fake_send):
    with pytest.raises(InvalidRequestError):
        get("http://127.0.0.1:9/", headers={"X-Name": "中文"})
    assert fake_send.sent == []
