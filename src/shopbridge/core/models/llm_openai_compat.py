from __future__ import annotations

import logging
import time

from shopbridge.core.config.settings import Settings
from shopbridge.core.errors import ConfigurationError
from shopbridge.core.http.client import read_json_body, send_json
from shopbridge.core.logging.redact import redact_string

FALLBACK_REPLY = "Sorry, I couldn’t parse a reply."


class OpenAICompatClient:
    def __init__(
        self,
        url: str,
        model: str,
        api_key: str | None,
        timeout_s: float = 10.0,
        connect_timeout_s: float = 5.0,
    ) -> None:
        self.url = url
        self.model = model
        self.api_key = api_key
        self.timeout_s = timeout_s
        self.connect_timeout_s = connect_timeout_s
        self.logger = logging.getLogger("shopbridge.llm")

    @classmethod
    def from_settings(cls, settings: Settings) -> OpenAICompatClient:
        return cls(
            url=settings.openai_chat_url,
            model=settings.openai_model,
            api_key=settings.openai_api_key,
            timeout_s=settings.http_timeout_s,
            connect_timeout_s=settings.http_connect_timeout_s,
        )

    def chat_completion(self, messages: list[dict[str, str]]) -> str:
        if not self.api_key:
            raise ConfigurationError("OPENAI_API_KEY missing in environment")

        start = time.perf_counter()
        response = send_json(
            "POST",
            self.url,
            headers={"Authorization": f"Bearer {self.api_key}"},
            json={"model": self.model, "messages": messages},
            timeout_s=self.timeout_s,
            connect_timeout_s=self.connect_timeout_s,
            service="llm",
        )
        data = read_json_body(response)
        if not response.is_success:
            self.logger.error(
                "llm_non_success",
                extra={
                    "extra_fields": {
                        "status": response.status_code,
                        "reason": response.reason_phrase,
                        "body": redact_string(str(data)),
                    }
                },
            )

        self.logger.info(
            "llm_call",
            extra={
                "extra_fields": {
                    "model": self.model,
                    "duration_ms": int((time.perf_counter() - start) * 1000),
                    "ok": response.is_success,
                    "messages": len(messages),
                }
            },
        )
        return _reply_text(data) or FALLBACK_REPLY


def _reply_text(data: dict) -> str:
    choices = data.get("choices") or []
    if not isinstance(choices, list) or not choices:
        return ""
    first = choices[0] if isinstance(choices[0], dict) else {}
    message = first.get("message") or {}
    content = message.get("content") if isinstance(message, dict) else None
    return content.strip() if isinstance(content, str) else ""
