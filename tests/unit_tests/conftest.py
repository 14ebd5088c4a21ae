"""Shared fixtures: a fake HTTP transport that records every outbound request."""

import json

import httpx
import pytest

from application.model_client import ModelClient
from domain.models import ModelRequest


class RecordingTransport:
    """Returns a canned response (or raises) and keeps the requests it saw."""

    def __init__(self, status_code=200, payload=None, error=None):
        self.status_code = status_code
        self.payload = payload if payload is not None else {}
        self.error = error
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_body(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def make_client():
    """Build a ModelClient wired to a RecordingTransport."""

    def _make(config=None, timeout=None, **transport_kwargs):
        transport = RecordingTransport(**transport_kwargs)
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(transport))
        client = ModelClient(config, http_client=http_client, timeout=timeout, placeholder_delay=0)
        return client, transport

    return _make


@pytest.fixture
def hi_request():
    return ModelRequest(message="hi", model="gpt-3.5-turbo")


@pytest.fixture
def openai_payload():
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-3.5-turbo",
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": "hello"},
            }
        ],
    }


@pytest.fixture
def anthropic_payload():
    return {
        "id": "msg_1",
        "type": "message",
        "role": "assistant",
        "model": "claude-3-haiku-20240307",
        "content": [{"type": "text", "text": "bonjour"}],
        "usage": {"input_tokens": 7, "output_tokens": 5},
    }
