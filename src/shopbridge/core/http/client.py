from __future__ import annotations

import threading
from typing import Any

import httpx

from shopbridge.core.errors import UpstreamTransportError

_DEFAULT_TIMEOUT_S = 10.0
_DEFAULT_CONNECT_TIMEOUT_S = 5.0
USER_AGENT = "ShopBridge/0.1"

_client: httpx.Client | None = None
_client_lock = threading.Lock()


def _build_timeout(total_s: float, connect_s: float = _DEFAULT_CONNECT_TIMEOUT_S) -> httpx.Timeout:
    read_total = max(0.1, total_s)
    return httpx.Timeout(read_total, connect=min(max(0.1, connect_s), read_total))


def get_http_client() -> httpx.Client:
    global _client
    if _client is not None:
        return _client

    with _client_lock:
        if _client is None:
            _client = httpx.Client(
                timeout=_build_timeout(_DEFAULT_TIMEOUT_S),
                headers={"User-Agent": USER_AGENT},
            )
    return _client


def send_json(
    method: str,
    url: str,
    *,
    headers: dict[str, str] | None = None,
    json: object | None = None,
    timeout_s: float = _DEFAULT_TIMEOUT_S,
    connect_timeout_s: float = _DEFAULT_CONNECT_TIMEOUT_S,
    service: str = "upstream",
) -> httpx.Response:
    """Send one request with an explicit timeout. Never retries.

    Any status code is returned to the caller; only transport failures raise.
    """
    merged_headers = {"Content-Type": "application/json", **(headers or {})}
    client = get_http_client()
    try:
        return client.request(
            method,
            url,
            headers=merged_headers,
            json=json,
            timeout=_build_timeout(timeout_s, connect_timeout_s),
        )
    except httpx.TimeoutException as exc:
        raise UpstreamTransportError(f"{service} request timed out: {exc.__class__.__name__}", service=service) from exc
    except httpx.HTTPError as exc:
        raise UpstreamTransportError(f"{service} request failed: {exc.__class__.__name__}", service=service) from exc


def read_json_body(response: httpx.Response) -> dict[str, Any]:
    # Unparsable or non-object bodies read as empty.
    try:
        payload = response.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}
