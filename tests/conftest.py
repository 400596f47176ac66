from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from doc_summary.config import AppConfig, get_config

_CONFIG_ENV = (
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
    "GEMINI_MODEL",
    "GEMINI_API_BASE_URL",
    "GEMINI_API_VERSION",
    "TEMPERATURE",
    "TOP_P",
    "TOP_K",
    "MAX_OUTPUT_TOKENS",
    "MAX_TEXT_LENGTH",
    "PREVIEW_CHARS",
    "PROMPT_STYLE",
    "REQUEST_TIMEOUT_SECONDS",
    "ANTIWORD_COMMAND",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    for name in _CONFIG_ENV:
        monkeypatch.delenv(name, raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


def make_config(**env: Any) -> AppConfig:
    values: dict[str, Any] = {"GEMINI_API_KEY": "test-key"}
    values.update(env)
    return AppConfig(_env_file=None, **values)  # type: ignore[call-arg]


def gemini_payload(text: str) -> dict[str, Any]:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class GeminiStub:
    """Records every request and replies with a canned response."""

    def __init__(
        self,
        *,
        status_code: int = 200,
        payload: Any = None,
        text: str | None = None,
        error: Exception | None = None,
    ) -> None:
        self.status_code = status_code
        self.payload = gemini_payload("Summary X") if payload is None else payload
        self.text = text
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def last_body(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)

    def last_prompt(self) -> str:
        return self.last_body()["contents"][0]["parts"][0]["text"]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def config_factory():
    return make_config


@pytest.fixture
def gemini_stub_factory():
    return GeminiStub
