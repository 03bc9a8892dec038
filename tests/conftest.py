from __future__ import annotations

import json
from collections.abc import Callable, Iterator

import httpx
import pytest

from shopbridge.apps.api import deps

_ENV_VARS = (
    "SHOPIFY_DOMAIN",
    "SHOPIFY_STOREFRONT_TOKEN",
    "SHOPIFY_STOREFRONT_API_VERSION",
    "SHOPIFY_ADMIN_TOKEN",
    "SHOPIFY_ADMIN_API_VERSION",
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "OPENAI_CHAT_URL",
    "SHOPBRIDGE_HTTP_TIMEOUT_S",
    "SHOPBRIDGE_LOG_TO_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    deps.clear_dependency_caches()
    yield
    deps.clear_dependency_caches()


class RecordingTransport:
    """Routes requests to a handler and keeps every request it saw."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def bodies(self) -> list[dict]:
        return [json.loads(request.content) for request in self.requests]


@pytest.fixture
def mock_http(monkeypatch: pytest.MonkeyPatch) -> Callable[[Callable[[httpx.Request], httpx.Response]], RecordingTransport]:
    def install(handler: Callable[[httpx.Request], httpx.Response]) -> RecordingTransport:
        recorder = RecordingTransport(handler)
        client = httpx.Client(transport=httpx.MockTransport(recorder))
        monkeypatch.setattr("shopbridge.core.http.client.get_http_client", lambda: client)
        return recorder

    return install
