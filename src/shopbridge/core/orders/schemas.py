from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class TrackingEntry(BaseModel):
    company: str | None = None
    number: str | None = None
    url: str | None = None


class LineItem(BaseModel):
    title: str
    qty: int


class Order(BaseModel):
    found: Literal[True] = True
    name: str
    email: str | None = None
    financial_status: str | None = None
    fulfillment_status: str | None = None
    line_items: list[LineItem] = Field(default_factory=list)
    tracking: list[TrackingEntry] = Field(default_factory=list)


class OrderNotFound(BaseModel):
    found: Literal[False] = False


class OrderQuery(BaseModel):
    first: int = 1
    q: str
