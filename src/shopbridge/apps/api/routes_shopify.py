from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from shopbridge.core.catalog.adapter import CatalogAdapter
from shopbridge.core.config.settings import Settings

from .deps import get_catalog, get_settings

router = APIRouter()


def _presence(value: str | None) -> str:
    return "present ✅" if value else "missing ❌"


@router.get("/shopify/ping")
def storefront_ping(settings: Settings = Depends(get_settings)) -> dict[str, str | None]:
    return {"domain": settings.shopify_domain, "token": _presence(settings.storefront_token)}


@router.get("/shopify-admin/ping")
def admin_ping(settings: Settings = Depends(get_settings)) -> dict[str, str | None]:
    return {
        "domain": settings.shopify_domain,
        "adminToken": _presence(settings.admin_token),
        "version": settings.admin_api_version,
    }


@router.get("/shopify/products")
def list_products(limit: str | None = Query(default=None), catalog: CatalogAdapter = Depends(get_catalog)) -> dict:
    return catalog.list_products(limit).model_dump()


@router.get("/shopify/product/{handle}")
def product_by_handle(handle: str, catalog: CatalogAdapter = Depends(get_catalog)):
    product = catalog.product_by_handle(handle)
    if product is None:
        return JSONResponse(status_code=404, content={"error": "Not found"})
    return {"product": product.model_dump()}


@router.get("/shopify/search")
def search_products(
    query: str | None = Query(default=None),
    q: str | None = Query(default=None),
    catalog: CatalogAdapter = Depends(get_catalog),
) -> dict:
    return catalog.search(query or q).model_dump()
