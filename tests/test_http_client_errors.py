from __future__ import annotations

import httpx
import pytest

from shopbridge.core.errors import UpstreamTransportError
from shopbridge.core.http import client as http_client
from shopbridge.core.http.client import USER_AGENT, read_json_body, send_json


def test_send_json_returns_non_success_responses_without_retrying(mock_http) -> None:
    recorder = mock_http(lambda request: httpx.Response(503, request=request, json={"oops": True}))

    response = send_json("POST", "https://upstream.test/x", json={"a": 1}, timeout_s=2.0)

    assert response.status_code == 503
    assert len(recorder.requests) == 1
    assert recorder.requests[0].headers["Content-Type"] == "application/json"


def test_send_json_maps_timeouts_to_transport_error(mock_http) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    recorder = mock_http(handler)

    with pytest.raises(UpstreamTransportError) as excinfo:
        send_json("POST", "https://upstream.test/x", service="shopify")

    assert excinfo.value.service == "shopify"
    assert "timed out" in str(excinfo.value)
    assert len(recorder.requests) == 1


def test_send_json_maps_connect_errors_to_transport_error(mock_http) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    mock_http(handler)

    with pytest.raises(UpstreamTransportError):
        send_json("GET", "https://upstream.test/x")


def test_read_json_body_treats_garbage_as_empty() -> None:
    request = httpx.Request("GET", "https://upstream.test/x")

    assert read_json_body(httpx.Response(200, request=request, content=b"<html>nope</html>")) == {}
    assert read_json_body(httpx.Response(200, request=request, json=[1, 2])) == {}
    assert read_json_body(httpx.Response(200, request=request, json={"data": {}})) == {"data": {}}


def test_shared_client_sends_fixed_user_agent(monkeypatch) -> None:
    monkeypatch.setattr(http_client, "_client", None)
    monkeypatch.setenv("SHOPBRIDGE_HTTP_USER_AGENT", "something-else/9")

    client = http_client.get_http_client()
    try:
        assert client.headers["User-Agent"] == USER_AGENT == "ShopBridge/0.1"
        assert http_client.get_http_client() is client
    finally:
        client.close()
