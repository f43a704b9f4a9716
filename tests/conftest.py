import json

import pytest
import requests

from llm_assistant.llm import transport
from llm_assistant.settings import AssistantConfig

VALID_KEY = "sk-test-0123456789abcdef"


def make_response(body, status=200, url="https://api.openai.com/v1/test"):
    resp = requests.Response()
    resp.status_code = status
    resp.url = url
    if not isinstance(body, (str, bytes)):
        body = json.dumps(body)
    resp._content = body.encode() if isinstance(body, str) else body
    return resp


class FakeHTTP:
    """Records outbound calls and replays a canned response or exception."""

    def __init__(self):
        self.calls = []
        self.result = make_response({})

    def _reply(self):
        if isinstance(self.result, Exception):
            raise self.result
        return self.result

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({"method": "POST", "url": url, "json": json, "headers": headers, "timeout": timeout})
        return self._reply()

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"method": "GET", "url": url, "headers": headers, "timeout": timeout})
        return self._reply()


@pytest.fixture
def fake_http(monkeypatch):
    fake = FakeHTTP()
    monkeypatch.setattr(transport.requests, "post", fake.post)
    monkeypatch.setattr(transport.requests, "get", fake.get)
    return fake


@pytest.fixture
def config():
    return AssistantConfig(api_key=VALID_KEY, model="gpt-4o-mini", system_prompt="Be brief.")
