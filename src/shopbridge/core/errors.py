from __future__ import annotations

from typing import Any


class ShopBridgeError(RuntimeError):
    """Base error for everything the service raises on purpose."""


class ConfigurationError(ShopBridgeError):
    """A required setting is absent. Raised before any upstream is contacted."""


class ClientInputError(ShopBridgeError):
    """A caller-supplied field is missing or invalid."""


class UpstreamError(ShopBridgeError):
    def __init__(self, message: str, service: str = "upstream") -> None:
        super().__init__(message)
        self.service = service


class UpstreamTransportError(UpstreamError):
    """Network failure or timeout talking to an upstream."""


class UpstreamAPIError(UpstreamError):
    def __init__(
        self,
        message: str,
        service: str = "upstream",
        status_code: int | None = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message, service=service)
        self.status_code = status_code
        self.payload = payload
