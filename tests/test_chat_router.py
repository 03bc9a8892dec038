from __future__ import annotations

import pytest

from shopbridge.core.chat.presets import PRODUCT_KB
from shopbridge.core.chat.router import ChatRouter
from shopbridge.core.errors import ConfigurationError, UpstreamAPIError
from shopbridge.core.models.llm_openai_compat import OpenAICompatClient
from shopbridge.core.orders.schemas import LineItem, Order, OrderNotFound, TrackingEntry


class FakeLLM:
    def __init__(self, reply: str = "LLM says hi") -> None:
        self.reply = reply
        self.calls: list[list[dict]] = []

    def chat_completion(self, messages: list[dict]) -> str:
        self.calls.append(messages)
        return self.reply


class FakeLookup:
    def __init__(self, result=None, error: Exception | None = None) -> None:
        self.result = result if result is not None else OrderNotFound()
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def find_order(self, order_number: str, email: str):
        self.calls.append((order_number, email))
        if self.error is not None:
            raise self.error
        return self.result


def _order(**overrides) -> Order:
    values = {
        "name": "#4521",
        "email": "foo@bar.com",
        "financial_status": "PAID",
        "fulfillment_status": "IN_TRANSIT",
        "line_items": [LineItem(title=f"Item {i}", qty=i) for i in range(1, 6)],
        "tracking": [TrackingEntry(company="UPS", number="1Z9", url="https://ups.test/1Z9")],
    }
    values.update(overrides)
    return Order(**values)


def test_test_marker_echoes_without_any_backend_call() -> None:
    llm = FakeLLM()
    lookup = FakeLookup()

    reply = ChatRouter(llm=llm, order_lookup=lookup).handle("test: hello")

    assert reply.model_dump(exclude_none=True) == {"reply": "Echo ✅ hello"}
    assert llm.calls == []
    assert lookup.calls == []


def test_found_order_reply_has_name_status_tracking_and_four_items() -> None:
    lookup = FakeLookup(result=_order())

    reply = ChatRouter(llm=FakeLLM(), order_lookup=lookup).handle("Where is order 4521? foo@bar.com")

    assert lookup.calls == [("4521", "foo@bar.com")]
    assert reply.reply == (
        "Order #4521 — IN_TRANSIT. Tracking: https://ups.test/1Z9 "
        "Items: 1× Item 1, 2× Item 2, 3× Item 3, 4× Item 4."
    )
    assert reply.order is not None
    assert reply.order.model_dump() == {
        "name": "#4521",
        "email": "foo@bar.com",
        "status": "IN_TRANSIT",
        "tracking": [{"company": "UPS", "number": "1Z9", "url": "https://ups.test/1Z9"}],
    }


def test_tracking_without_url_uses_company_and_number() -> None:
    order = _order(tracking=[TrackingEntry(company="DHL", number="JD1")], line_items=[])

    reply = ChatRouter(llm=FakeLLM(), order_lookup=FakeLookup(result=order)).handle("#4521 foo@bar.com")

    assert reply.reply == "Order #4521 — IN_TRANSIT. Tracking: DHL JD1"


def test_order_without_tracking_says_so() -> None:
    order = _order(tracking=[], line_items=[LineItem(title="Paper", qty=2)])

    reply = ChatRouter(llm=FakeLLM(), order_lookup=FakeLookup(result=order)).handle("order 4521 foo@bar.com")

    assert reply.reply == "Order #4521 — IN_TRANSIT. No tracking yet. Items: 2× Paper."


def test_missing_order_gets_could_not_find_reply() -> None:
    llm = FakeLLM()

    reply = ChatRouter(llm=llm, order_lookup=FakeLookup()).handle("order 4521 foo@bar.com")

    assert reply.reply == (
        "I couldn’t find order #4521 for foo@bar.com. "
        "Double-check the order number and the exact email on the order."
    )
    assert reply.order is None
    assert llm.calls == []


def test_lookup_failure_falls_through_to_chat_backend() -> None:
    llm = FakeLLM("fallback answer")
    lookup = FakeLookup(error=UpstreamAPIError("Shopify Admin error: boom", service="shopify-admin"))

    reply = ChatRouter(llm=llm, order_lookup=lookup).handle("order 4521 foo@bar.com")

    assert reply.reply == "fallback answer"
    assert len(lookup.calls) == 1
    assert len(llm.calls) == 1


def test_without_order_lookup_both_pieces_go_to_chat_backend() -> None:
    llm = FakeLLM()

    reply = ChatRouter(llm=llm, order_lookup=None).handle("order 4521 foo@bar.com")

    assert reply.reply == "LLM says hi"
    assert llm.calls[0][1] == {"role": "user", "content": "order 4521 foo@bar.com"}


@pytest.mark.parametrize(
    ("message", "missing"),
    [
        ("my email is foo@bar.com", "the order number"),
        ("where is order 4521", "the email used on the order"),
    ],
)
def test_partial_details_ask_for_missing_piece(message, missing) -> None:
    llm = FakeLLM()
    lookup = FakeLookup()

    reply = ChatRouter(llm=llm, order_lookup=lookup).handle(message)

    assert reply.reply == f"Got it. Please provide {missing} so I can look it up."
    assert llm.calls == []
    assert lookup.calls == []


def test_default_path_uses_mode_preset_and_product_fields() -> None:
    llm = FakeLLM()

    ChatRouter(llm=llm).handle("  ", mode="bundleOffer", product={"printerUrl": "https://shop.test/p"})

    system = llm.calls[0][0]["content"]
    assert "https://shop.test/p" in system
    assert PRODUCT_KB["a4Paper"]["url"] in system


def test_missing_chat_credential_raises_configuration_error() -> None:
    llm = OpenAICompatClient(url="https://llm.test/v1/chat/completions", model="m", api_key=None)

    with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
        ChatRouter(llm=llm).handle("hello there")
