from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from .context import get_log_context
from .redact import redact_string

SERVICE_NAME = "shopbridge"


class JSONFormatter(logging.Formatter):
    """One JSON object per line, tagged with the service and the bound request context."""

    def __init__(self, service: str = SERVICE_NAME) -> None:
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts_iso_utc": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "service": self.service,
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        payload.update(get_log_context())

        extra_fields = getattr(record, "extra_fields", None)
        if isinstance(extra_fields, dict):
            payload.update(extra_fields)

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            payload["exc_type"] = exc_type.__name__ if exc_type else "Exception"
            payload["exc_msg"] = redact_string(str(exc_value)) if exc_value else ""
            payload["stack"] = self.formatException(record.exc_info)

        # Upstream payloads can carry non-JSON types (Decimal, datetime).
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)
