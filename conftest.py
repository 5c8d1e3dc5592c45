"""Pytest fixtures shared by the StoryWeaver tests."""

import json
from typing import Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from storyweaver.config import Settings
from storyweaver.dependencies import get_completion_provider
from storyweaver.main import app
from storyweaver.services.completion_service import CompletionProvider, OpenAICompletionProvider


class StubProvider(CompletionProvider):
    """Records every call and answers with a canned story (or raises)"""

    def __init__(self, story: str = "Once upon a time.", error: Optional[Exception] = None):
        self.story = story
        self.error = error
        self.calls = []

    async def complete(self, prompt, *, max_tokens, temperature):
        self.calls.append({"prompt": prompt, "max_tokens": max_tokens, "temperature": temperature})
        if self.error:
            raise self.error
        return self.story

    async def check_connection(self):
        if self.error:
            raise self.error
        return True


def chat_completion_body(content):
    """Minimal OpenAI chat-completion response body"""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "llama70b",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


@pytest.fixture
def settings():
    return Settings(api_key="test-key", api_endpoint="https://gaia.test/v1", model="llama70b", request_timeout=5)


@pytest.fixture
def stub_provider():
    return StubProvider()


@pytest.fixture
def client(stub_provider):
    """TestClient whose completion provider is the stub"""
    app.dependency_overrides[get_completion_provider] = lambda: stub_provider
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def upstream():
    """Fake chat-completion server backed by httpx.MockTransport.

    Set ``upstream.response`` to an httpx.Response (or an exception to raise);
    every request is recorded in ``upstream.requests`` with its decoded JSON body.
    """

    class Upstream:
        def __init__(self):
            self.response = httpx.Response(200, json=chat_completion_body("  A tale.  "))
            self.requests = []

        def handler(self, request: httpx.Request):
            body = json.loads(request.content) if request.content else None
            self.requests.append({"method": request.method, "url": str(request.url), "json": body})
            if isinstance(self.response, Exception):
                raise self.response
            return self.response

    return Upstream()


@pytest.fixture
def openai_provider(settings, upstream):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler))
    return OpenAICompletionProvider(settings, http_client=http_client)
