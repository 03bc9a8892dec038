from __future__ import annotations

from functools import lru_cache

from shopbridge.core.catalog.adapter import CatalogAdapter
from shopbridge.core.chat.router import ChatRouter
from shopbridge.core.config.settings import Settings
from shopbridge.core.models.llm_openai_compat import OpenAICompatClient
from shopbridge.core.orders.lookup import OrderLookup
from shopbridge.core.shopify.graphql import AdminClient, StorefrontClient


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


@lru_cache(maxsize=1)
def get_storefront_client() -> StorefrontClient:
    return StorefrontClient.from_settings(get_settings())


@lru_cache(maxsize=1)
def get_admin_client() -> AdminClient:
    return AdminClient.from_settings(get_settings())


@lru_cache(maxsize=1)
def get_catalog() -> CatalogAdapter:
    return CatalogAdapter(client=get_storefront_client())


@lru_cache(maxsize=1)
def get_order_lookup() -> OrderLookup:
    return OrderLookup(client=get_admin_client())


@lru_cache(maxsize=1)
def get_llm() -> OpenAICompatClient:
    return OpenAICompatClient.from_settings(get_settings())


@lru_cache(maxsize=1)
def get_chat_router() -> ChatRouter:
    # Order lookup from chat only runs when an admin token is configured.
    order_lookup = get_order_lookup() if get_settings().admin_token else None
    return ChatRouter(llm=get_llm(), order_lookup=order_lookup)


def clear_dependency_caches() -> None:
    for getter in (
        get_settings,
        get_storefront_client,
        get_admin_client,
        get_catalog,
        get_order_lookup,
        get_llm,
        get_chat_router,
    ):
        getter.cache_clear()
