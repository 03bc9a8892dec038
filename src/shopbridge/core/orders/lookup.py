from __future__ import annotations

import logging

from shopbridge.core.shopify import queries
from shopbridge.core.shopify.graphql import GraphQLClient

from .schemas import LineItem, Order, OrderNotFound, OrderQuery, TrackingEntry

logger = logging.getLogger(__name__)


def normalize_order_number(order_number: object) -> str:
    value = str(order_number or "").strip()
    return value[1:] if value.startswith("#") else value


def normalize_email(email: object) -> str:
    return str(email or "").strip().lower()


def build_order_query(order_number: object, email: object) -> OrderQuery:
    """Admin search for the newest order matching both name and email."""
    q = f"name:{normalize_order_number(order_number)} AND email:{normalize_email(email)}"
    return OrderQuery(first=1, q=q)


def _first(values: object) -> str | None:
    if isinstance(values, list) and values:
        return values[0]
    return None


def flatten_tracking(fulfillments: list[dict] | None) -> list[TrackingEntry]:
    """One entry per structured tracking item, in fulfillment order.

    A fulfillment without structured items still yields a single entry built
    from its scalar tracking fields.
    """
    tracking: list[TrackingEntry] = []
    for fulfillment in fulfillments or []:
        company = fulfillment.get("trackingCompany") or None
        number = _first(fulfillment.get("trackingNumbers"))
        url = _first(fulfillment.get("trackingUrls"))

        info = fulfillment.get("trackingInfo")
        if isinstance(info, list) and info:
            for entry in info:
                tracking.append(
                    TrackingEntry(
                        company=entry.get("company") or company,
                        number=entry.get("number") or number,
                        url=entry.get("url") or url,
                    )
                )
        else:
            tracking.append(TrackingEntry(company=company, number=number, url=url))
    return tracking


def to_order(node: dict) -> Order:
    line_nodes = (node.get("lineItems") or {}).get("nodes") or []
    return Order(
        name=node.get("name") or "",
        email=node.get("email"),
        financial_status=node.get("displayFinancialStatus"),
        fulfillment_status=node.get("displayFulfillmentStatus"),
        line_items=[LineItem(title=item.get("name") or "", qty=int(item.get("quantity") or 0)) for item in line_nodes],
        tracking=flatten_tracking(node.get("fulfillments")),
    )


class OrderLookup:
    def __init__(self, client: GraphQLClient) -> None:
        self.client = client

    def find_order(self, order_number: object, email: object) -> Order | OrderNotFound:
        order_query = build_order_query(order_number, email)
        data = self.client.execute(queries.FIND_ORDER, order_query.model_dump())
        nodes = (data.get("orders") or {}).get("nodes") or []
        if not nodes:
            logger.info("order_not_found", extra={"extra_fields": {"order_number": normalize_order_number(order_number)}})
            return OrderNotFound()
        return to_order(nodes[0])
