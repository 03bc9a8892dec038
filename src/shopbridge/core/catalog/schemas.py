from __future__ import annotations

from pydantic import BaseModel, Field


class Money(BaseModel):
    amount: str
    currencyCode: str

    def format(self) -> str:
        return f"{self.amount} {self.currencyCode}"


class PriceRange(BaseModel):
    minVariantPrice: Money | None = None
    maxVariantPrice: Money | None = None


class ProductImage(BaseModel):
    url: str | None = None
    altText: str | None = None


class CatalogItem(BaseModel):
    id: str
    title: str
    handle: str
    url: str | None = None
    image: str | None = None
    price: str | None = None
    compareAt: str | None = None
    priceRange: PriceRange | None = None


class SearchItem(BaseModel):
    id: str
    title: str
    handle: str
    url: str | None = None
    image: str | None = None
    priceFrom: Money | None = None
    priceTo: Money | None = None


class Variant(BaseModel):
    id: str
    title: str
    availableForSale: bool = False
    price: str | None = None
    compareAt: str | None = None


class ProductDetail(CatalogItem):
    description: str | None = None
    images: list[ProductImage] = Field(default_factory=list)
    variants: list[Variant] = Field(default_factory=list)


class ProductList(BaseModel):
    count: int
    items: list[CatalogItem]


class SearchResults(BaseModel):
    query: str
    count: int
    items: list[SearchItem]
