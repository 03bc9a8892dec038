from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from shopbridge.core.errors import ShopBridgeError
from shopbridge.core.models.llm_openai_compat import OpenAICompatClient
from shopbridge.core.orders.lookup import OrderLookup
from shopbridge.core.orders.schemas import Order, TrackingEntry

from .intent import Intent, detect_intent, echo_body
from .presets import compose_messages

logger = logging.getLogger(__name__)

MAX_SUMMARY_ITEMS = 4


class OrderSummary(BaseModel):
    name: str
    email: str | None = None
    status: str | None = None
    tracking: list[TrackingEntry] = Field(default_factory=list)


class ChatReply(BaseModel):
    reply: str
    order: OrderSummary | None = None


def tracking_text(order: Order) -> str:
    if not order.tracking:
        return "No tracking yet."
    first = order.tracking[0]
    if first.url:
        return f"Tracking: {first.url}"
    return "Tracking: " + " ".join(part for part in (first.company, first.number) if part)


def order_reply(order: Order) -> str:
    items = ", ".join(f"{item.qty}× {item.title}" for item in order.line_items[:MAX_SUMMARY_ITEMS])
    reply = f"Order {order.name} — {order.fulfillment_status}. {tracking_text(order)}"
    if items:
        reply += f" Items: {items}."
    return reply


def not_found_reply(order_number: str, email: str) -> str:
    return (
        f"I couldn’t find order #{order_number} for {email}. "
        "Double-check the order number and the exact email on the order."
    )


def missing_piece_reply(intent: Intent) -> str:
    missing = "the email used on the order" if not intent.email else "the order number"
    return f"Got it. Please provide {missing} so I can look it up."


class ChatRouter:
    """Routes one chat message to order lookup, a follow-up prompt, or the chat backend."""

    def __init__(
        self,
        llm: OpenAICompatClient,
        order_lookup: OrderLookup | None = None,
    ) -> None:
        self.llm = llm
        self.order_lookup = order_lookup

    def handle(self, message: object, mode: object = None, product: object = None) -> ChatReply:
        text = str(message or "").strip()

        echo = echo_body(text)
        if echo is not None:
            return ChatReply(reply=f"Echo ✅ {echo}")

        intent = detect_intent(text)

        if intent.complete and self.order_lookup is not None:
            reply = self._lookup_reply(intent)
            if reply is not None:
                return reply

        if intent.partial:
            return ChatReply(reply=missing_piece_reply(intent))

        return ChatReply(reply=self.llm.chat_completion(compose_messages(mode, text, product)))

    def _lookup_reply(self, intent: Intent) -> ChatReply | None:
        try:
            result = self.order_lookup.find_order(intent.order_number, intent.email)
        except ShopBridgeError as exc:
            logger.warning(
                "order_lookup_failed",
                extra={"extra_fields": {"error_type": exc.__class__.__name__, "error": str(exc)}},
            )
            return None

        if not isinstance(result, Order):
            return ChatReply(reply=not_found_reply(intent.order_number, intent.email))

        return ChatReply(
            reply=order_reply(result),
            order=OrderSummary(
                name=result.name,
                email=result.email,
                status=result.fulfillment_status,
                tracking=result.tracking,
            ),
        )
