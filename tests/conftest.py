from __future__ import annotations

from typing import List

import pytest
import requests


def make_response(status_code: int, body: str = "", encoding: str = "utf-8") -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = body.encode(encoding)
    resp.encoding = encoding
    return resp


class SendRecorder:
    """替代 requests.Session.send，记录发送出去的 PreparedRequest。"""

    def __init__(self, response: requests.Response | None = None, error: Exception | None = None):
        self.response = response if response is not None else make_response(200)
        self.error = error
        self.sent: List[requests.PreparedRequest] = []

    def __call__(self, session, prepared, **kwargs):
        self.sent.append(prepared)
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last(self) -> requests.PreparedRequest:
        return self.sent[-1]


@pytest.fixture()
def fake_send(monkeypatch):
    """把 requests.Session.send 换成 SendRecorder，返回 recorder 以便设置响应与检查请求。"""
    recorder = SendRecorder()
    monkeypatch.setattr(requests.Session, "send", lambda session, prepared, **kw: recorder(session, prepared, **kw))
    return recorder
