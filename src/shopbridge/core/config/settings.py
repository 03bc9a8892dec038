from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_API_VERSION = "2025-01"
DEFAULT_CHAT_MODEL = "gpt-4o-mini"
DEFAULT_CHAT_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_PORT = 3000
DEFAULT_STATIC_DIR = Path(__file__).resolve().parents[2] / "apps" / "api" / "static"


def _clean(raw: str | None) -> str | None:
    if raw is None:
        return None
    value = raw.strip()
    return value or None


def _get_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    shopify_domain: str | None = None
    storefront_token: str | None = None
    storefront_api_version: str = DEFAULT_API_VERSION
    admin_token: str | None = None
    admin_api_version: str = DEFAULT_API_VERSION
    openai_api_key: str | None = None
    openai_model: str = DEFAULT_CHAT_MODEL
    openai_chat_url: str = DEFAULT_CHAT_URL
    http_timeout_s: float = 10.0
    http_connect_timeout_s: float = 5.0
    static_dir: Path = DEFAULT_STATIC_DIR
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    log_to_file: bool = False
    log_dir: Path = Path("logs")

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if env is None else env
        static_dir = _clean(env.get("SHOPBRIDGE_STATIC_DIR"))
        return cls(
            shopify_domain=_clean(env.get("SHOPIFY_DOMAIN")),
            storefront_token=_clean(env.get("SHOPIFY_STOREFRONT_TOKEN")),
            storefront_api_version=_clean(env.get("SHOPIFY_STOREFRONT_API_VERSION")) or DEFAULT_API_VERSION,
            admin_token=_clean(env.get("SHOPIFY_ADMIN_TOKEN")),
            admin_api_version=_clean(env.get("SHOPIFY_ADMIN_API_VERSION")) or DEFAULT_API_VERSION,
            openai_api_key=_clean(env.get("OPENAI_API_KEY")),
            openai_model=_clean(env.get("OPENAI_MODEL")) or DEFAULT_CHAT_MODEL,
            openai_chat_url=_clean(env.get("OPENAI_CHAT_URL")) or DEFAULT_CHAT_URL,
            http_timeout_s=max(0.1, _get_float(env, "SHOPBRIDGE_HTTP_TIMEOUT_S", 10.0)),
            http_connect_timeout_s=max(0.1, _get_float(env, "SHOPBRIDGE_HTTP_CONNECT_TIMEOUT_S", 5.0)),
            static_dir=Path(static_dir).expanduser() if static_dir else DEFAULT_STATIC_DIR,
            port=_get_int(env, "PORT", DEFAULT_PORT),
            log_level=env.get("SHOPBRIDGE_LOG_LEVEL", "INFO"),
            log_to_file=env.get("SHOPBRIDGE_LOG_TO_FILE", "off").strip().casefold() == "on",
            log_dir=Path(env.get("SHOPBRIDGE_LOG_DIR") or "logs").expanduser(),
        )

    @property
    def storefront_ready(self) -> bool:
        return bool(self.shopify_domain and self.storefront_token)

    @property
    def admin_ready(self) -> bool:
        return bool(self.shopify_domain and self.admin_token)
