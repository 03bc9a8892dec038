from __future__ import annotations

import json
import logging
from typing import Any

from shopbridge.core.config.settings import Settings
from shopbridge.core.errors import ConfigurationError, UpstreamAPIError
from shopbridge.core.http.client import read_json_body, send_json

logger = logging.getLogger(__name__)


class GraphQLClient:
    """POSTs `{query, variables}` to one Shopify GraphQL endpoint and returns `data`."""

    service = "shopify"
    token_header = "X-Shopify-Storefront-Access-Token"
    error_prefix = "Shopify error"
    missing_config_message = "Shopify env missing. Set SHOPIFY_DOMAIN and SHOPIFY_STOREFRONT_TOKEN in .env"

    def __init__(
        self,
        domain: str | None,
        token: str | None,
        api_version: str,
        timeout_s: float = 10.0,
        connect_timeout_s: float = 5.0,
    ) -> None:
        self.domain = domain
        self.token = token
        self.api_version = api_version
        self.timeout_s = timeout_s
        self.connect_timeout_s = connect_timeout_s

    @property
    def configured(self) -> bool:
        return bool(self.domain and self.token)

    @property
    def url(self) -> str:
        return f"https://{self.domain}/api/{self.api_version}/graphql.json"

    def execute(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        if not self.configured:
            raise ConfigurationError(self.missing_config_message)

        response = send_json(
            "POST",
            self.url,
            headers={self.token_header: str(self.token)},
            json={"query": query, "variables": variables or {}},
            timeout_s=self.timeout_s,
            connect_timeout_s=self.connect_timeout_s,
            service=self.service,
        )
        body = read_json_body(response)
        has_errors = body.get("errors") is not None
        if not response.is_success or has_errors:
            errors = body["errors"] if has_errors else body
            raise UpstreamAPIError(
                f"{self.error_prefix}: {json.dumps(errors, indent=2, ensure_ascii=False)}",
                service=self.service,
                status_code=response.status_code,
                payload=errors,
            )

        logger.debug(
            "graphql_call",
            extra={"extra_fields": {"service": self.service, "status": response.status_code}},
        )
        data = body.get("data")
        return data if isinstance(data, dict) else {}


class StorefrontClient(GraphQLClient):
    @classmethod
    def from_settings(cls, settings: Settings) -> StorefrontClient:
        return cls(
            domain=settings.shopify_domain,
            token=settings.storefront_token,
            api_version=settings.storefront_api_version,
            timeout_s=settings.http_timeout_s,
            connect_timeout_s=settings.http_connect_timeout_s,
        )


class AdminClient(GraphQLClient):
    service = "shopify-admin"
    token_header = "X-Shopify-Access-Token"
    error_prefix = "Shopify Admin error"
    missing_config_message = "Admin env missing. Set SHOPIFY_DOMAIN and SHOPIFY_ADMIN_TOKEN in .env"

    @property
    def url(self) -> str:
        return f"https://{self.domain}/admin/api/{self.api_version}/graphql.json"

    @classmethod
    def from_settings(cls, settings: Settings) -> AdminClient:
        return cls(
            domain=settings.shopify_domain,
            token=settings.admin_token,
            api_version=settings.admin_api_version,
            timeout_s=settings.http_timeout_s,
            connect_timeout_s=settings.http_connect_timeout_s,
        )
