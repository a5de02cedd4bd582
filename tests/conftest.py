#!/usr/bin/env python3
# ABOUTME: Shared pytest fixtures for the trlt tests.
# ABOUTME: Isolates the config directory, environment and clipboard per test.

import json

import httpx
import openai
import pytest

from trlt.translator import API_BASE_URL


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Point the config directory at a temp dir and clear the API key."""
    config_home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.chdir(tmp_path)
    return config_home


@pytest.fixture(autouse=True)
def clipboard(monkeypatch):
    """Replace the system clipboard with a list of copied texts."""
    copied = []
    monkeypatch.setattr("pyperclip.copy", copied.append)
    return copied


@pytest.fixture
def mock_api():
    """Build an OpenAI client whose HTTP requests go to a stub endpoint.

    Call the returned factory with a JSON body (and optionally a status code);
    every request made through the client is recorded in factory.requests.
    """
    requests = []

    def factory(body, status_code=200):
        def handler(request):
            requests.append(request)
            if isinstance(body, Exception):
                raise body
            if isinstance(body, str):
                return httpx.Response(status_code, text=body)
            return httpx.Response(status_code, json=body)

        return openai.OpenAI(
            api_key="sk-test",
            base_url=API_BASE_URL,
            max_retries=0,
            http_client=httpx.Client(transport=httpx.MockTransport(handler)),
        )

    factory.requests = requests
    factory.sent_json = lambda index=0: json.loads(requests[index].content)
    return factory


@pytest.fixture
def completion():
    """Build a chat-completion response body carrying the given content."""

    def build(content):
        return {
            "id": "chatcmpl-test",
            "object": "chat.completion",
            "model": "gpt-4o-mini",
            "choices": [
                {
                    "index": 0,
                    "message": {"role": "assistant", "content": content},
                    "finish_reason": "stop",
                }
            ],
        }

    return build
