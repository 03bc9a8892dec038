from __future__ import annotations

import re

from pydantic import BaseModel

TEST_MARKER = "test:"

EMAIL_RE = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE | re.ASCII)
ORDER_NUMBER_RE = re.compile(r"(?:order\s*(?:number|no\.|#)?\s*|#)\s*(\d{3,10})\b", re.IGNORECASE | re.ASCII)


class Intent(BaseModel):
    email: str | None = None
    order_number: str | None = None

    @property
    def complete(self) -> bool:
        return bool(self.email and self.order_number)

    @property
    def partial(self) -> bool:
        return bool(self.email) != bool(self.order_number)


def extract_email(message: str) -> str | None:
    match = EMAIL_RE.search(message)
    return match.group(0).lower() if match else None


def extract_order_number(message: str) -> str | None:
    match = ORDER_NUMBER_RE.search(message)
    return match.group(1) if match else None


def detect_intent(message: str) -> Intent:
    return Intent(email=extract_email(message), order_number=extract_order_number(message))


def echo_body(message: str) -> str | None:
    """Return the diagnostic echo body when the message carries the test marker."""
    if not message.lower().startswith(TEST_MARKER):
        return None
    return message[len(TEST_MARKER):].strip()
