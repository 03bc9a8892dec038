from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel

BRAND_SYSTEM = """
You are the ecommerce assistant for TheGrantedSolutions.com (tech gadgets & gifts).
Tone: clear, punchy, conversion-focused. Avoid fluff. 1–2 lines max by default.
Return only the answer text (no preambles).
"""

PRODUCT_KB: dict[str, dict[str, str]] = {
    "printerC80": {
        "name": "Portable Inkless A4 C80 Printer",
        "url": "https://thegrantedsolutions.com/products/portable-inkless-thermal-a4-c80-printer-300dpi",
    },
    "a4Paper": {
        "name": "A4 Thermal Printer Paper – 20 Rolls (210×30mm)",
        "url": "https://thegrantedsolutions.com/products/a4-thermal-printer-paper-20-rolls-210x30mm",
    },
}

DEFAULT_BUNDLE_REQUEST = "Create a bundle offer for these two products."


class ChatMode(str, Enum):
    FREE = "free"
    BUNDLE_OFFER = "bundleOffer"

    @classmethod
    def parse(cls, raw: object) -> ChatMode:
        for mode in cls:
            if mode.value == raw:
                return mode
        return cls.FREE


class ProductOverrides(BaseModel):
    printerName: str | None = None
    paperName: str | None = None
    printerUrl: str | None = None
    paperUrl: str | None = None

    @classmethod
    def coerce(cls, raw: object) -> ProductOverrides:
        if isinstance(raw, ProductOverrides):
            return raw
        if not isinstance(raw, dict):
            return cls()
        return cls(**{name: str(raw[name]) for name in cls.model_fields if raw.get(name)})


Message = dict[str, str]


def free_preset(message: str, product: ProductOverrides) -> list[Message]:
    return [
        {"role": "system", "content": BRAND_SYSTEM},
        {"role": "user", "content": message},
    ]


def bundle_offer_preset(message: str, product: ProductOverrides) -> list[Message]:
    printer_name = product.printerName or PRODUCT_KB["printerC80"]["name"]
    paper_name = product.paperName or PRODUCT_KB["a4Paper"]["name"]
    printer_url = product.printerUrl or PRODUCT_KB["printerC80"]["url"]
    paper_url = product.paperUrl or PRODUCT_KB["a4Paper"]["url"]

    system = BRAND_SYSTEM + f"""
Task: Create a concise bundle/upsell pitch (max 2 lines).
- Return HTML with two <a> links:
  • {printer_name} -> {printer_url}
  • {paper_name} -> {paper_url}
- Line 1: Benefit-led reason (inkless convenience, never run out, crisp 300DPI).
- Line 2: Clear CTA including both links (“Shop the set”).
- Keep it punchy. No emojis.
"""
    return [
        {"role": "system", "content": system},
        {"role": "user", "content": message or DEFAULT_BUNDLE_REQUEST},
    ]


PRESETS: dict[ChatMode, Callable[[str, ProductOverrides], list[Message]]] = {
    ChatMode.FREE: free_preset,
    ChatMode.BUNDLE_OFFER: bundle_offer_preset,
}


def compose_messages(mode: object, message: str, product: object = None) -> list[Message]:
    preset = PRESETS[ChatMode.parse(mode)]
    return preset(message, ProductOverrides.coerce(product))
