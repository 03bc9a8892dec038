from __future__ import annotations

import re
from typing import Any

from shopbridge.core.errors import ClientInputError
from shopbridge.core.shopify import queries
from shopbridge.core.shopify.graphql import GraphQLClient

from .schemas import (
    CatalogItem,
    Money,
    PriceRange,
    ProductDetail,
    ProductImage,
    ProductList,
    SearchItem,
    SearchResults,
    Variant,
)

DEFAULT_LIMIT = 10
MAX_LIMIT = 50
MIN_LIMIT = 1

_LEADING_INT_RE = re.compile(r"\s*[+-]?\d+", re.ASCII)


def clamp_limit(raw: object) -> int:
    """Parse a caller page size and clamp it into [MIN_LIMIT, MAX_LIMIT].

    Only the leading integer counts, so "5abc" reads as 5 and "3.7" as 3.
    """
    match = _LEADING_INT_RE.match("" if raw is None else str(raw))
    if match is None:
        return DEFAULT_LIMIT
    value = int(match.group(0))
    return max(MIN_LIMIT, min(value, MAX_LIMIT))


def _money(raw: Any) -> Money | None:
    if not isinstance(raw, dict) or raw.get("amount") is None:
        return None
    return Money(amount=str(raw["amount"]), currencyCode=str(raw.get("currencyCode") or ""))


def _price_range(raw: Any) -> PriceRange | None:
    if not isinstance(raw, dict):
        return None
    return PriceRange(
        minVariantPrice=_money(raw.get("minVariantPrice")),
        maxVariantPrice=_money(raw.get("maxVariantPrice")),
    )


def _formatted(raw: Any) -> str | None:
    money = _money(raw)
    return money.format() if money is not None else None


def _edge_nodes(connection: Any) -> list[dict]:
    if not isinstance(connection, dict):
        return []
    return [edge.get("node") or {} for edge in connection.get("edges") or []]


def _variant(raw: dict) -> Variant:
    return Variant(
        id=raw.get("id") or "",
        title=raw.get("title") or "",
        availableForSale=bool(raw.get("availableForSale")),
        price=_formatted(raw.get("price")),
        compareAt=_formatted(raw.get("compareAtPrice")),
    )


def to_catalog_item(node: dict) -> CatalogItem:
    images = _edge_nodes(node.get("images"))
    variants = (node.get("variants") or {}).get("nodes") or []
    first_variant = variants[0] if variants else {}
    price_range = _price_range(node.get("priceRange"))

    price = _formatted(first_variant.get("price"))
    if price is None and price_range is not None and price_range.minVariantPrice is not None:
        price = price_range.minVariantPrice.format()

    return CatalogItem(
        id=node.get("id") or "",
        title=node.get("title") or "",
        handle=node.get("handle") or "",
        url=node.get("onlineStoreUrl"),
        image=images[0].get("url") if images else None,
        price=price,
        compareAt=_formatted(first_variant.get("compareAtPrice")),
        priceRange=price_range,
    )


def to_product_detail(node: dict) -> ProductDetail:
    images = [ProductImage(url=img.get("url"), altText=img.get("altText")) for img in _edge_nodes(node.get("images"))]
    variants = [_variant(raw) for raw in (node.get("variants") or {}).get("nodes") or []]
    price_range = _price_range(node.get("priceRange"))

    primary_price = variants[0].price if variants else None
    if primary_price is None and price_range is not None and price_range.minVariantPrice is not None:
        primary_price = price_range.minVariantPrice.format()

    return ProductDetail(
        id=node.get("id") or "",
        title=node.get("title") or "",
        handle=node.get("handle") or "",
        description=node.get("description"),
        url=node.get("onlineStoreUrl"),
        images=images,
        image=images[0].url if images else None,
        price=primary_price,
        compareAt=variants[0].compareAt if variants else None,
        priceRange=price_range,
        variants=variants,
    )


def to_search_item(node: dict) -> SearchItem:
    images = _edge_nodes(node.get("images"))
    price_range = _price_range(node.get("priceRange"))
    return SearchItem(
        id=node.get("id") or "",
        title=node.get("title") or "",
        handle=node.get("handle") or "",
        url=node.get("onlineStoreUrl"),
        image=images[0].get("url") if images else None,
        priceFrom=price_range.minVariantPrice if price_range else None,
        priceTo=price_range.maxVariantPrice if price_range else None,
    )


class CatalogAdapter:
    def __init__(self, client: GraphQLClient) -> None:
        self.client = client

    def list_products(self, limit: object = None) -> ProductList:
        data = self.client.execute(queries.LIST_PRODUCTS, {"n": clamp_limit(limit)})
        items = [to_catalog_item(node) for node in _edge_nodes(data.get("products"))]
        return ProductList(count=len(items), items=items)

    def product_by_handle(self, handle: str | None) -> ProductDetail | None:
        """Fetch one product. Returns None when the storefront has no such handle."""
        cleaned = str(handle or "").strip()
        if not cleaned:
            raise ClientInputError("Missing handle")

        data = self.client.execute(queries.PRODUCT_BY_HANDLE, {"h": cleaned})
        node = data.get("product")
        if not node:
            return None
        return to_product_detail(node)

    def search(self, query: str | None) -> SearchResults:
        cleaned = str(query or "").strip()
        if not cleaned:
            raise ClientInputError("Missing query (?query= or ?q=)")

        data = self.client.execute(queries.SEARCH_PRODUCTS, {"q": cleaned})
        items = [to_search_item(node) for node in _edge_nodes(data.get("products"))]
        return SearchResults(query=cleaned, count=len(items), items=items)
