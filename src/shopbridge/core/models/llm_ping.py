from __future__ import annotations

from typing import Any

from shopbridge.core.http.client import read_json_body, send_json

RESPONSES_URL = "https://api.openai.com/v1/responses"
PING_MODEL = "gpt-4.1-mini"
PING_INPUT = 'Say "pong".'


def response_text(data: dict[str, Any]) -> str | None:
    """Pull the first text block out of a Responses API payload."""
    for path in (("output", 0, "content", 0, "text"), ("response", "content", 0, "text")):
        node: Any = data
        for key in path:
            if isinstance(key, int):
                node = node[key] if isinstance(node, list) and len(node) > key else None
            else:
                node = node.get(key) if isinstance(node, dict) else None
            if node is None:
                break
        if isinstance(node, str):
            return node
    return None


def ping(api_key: str, url: str = RESPONSES_URL, model: str = PING_MODEL, timeout_s: float = 20.0) -> tuple[int, dict[str, Any]]:
    response = send_json(
        "POST",
        url,
        headers={"Authorization": f"Bearer {api_key}"},
        json={"model": model, "input": PING_INPUT},
        timeout_s=timeout_s,
        service="llm",
    )
    return response.status_code, read_json_body(response)
