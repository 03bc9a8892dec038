from __future__ import annotations

from fastapi import APIRouter, Body, Depends

from shopbridge.core.errors import ClientInputError
from shopbridge.core.orders.lookup import OrderLookup, normalize_email
from shopbridge.core.orders.schemas import Order

from .deps import get_order_lookup

router = APIRouter()

NOT_FOUND_NOTE = "No matching order. Check the order number and the exact email on the order."


@router.post("/order-status")
def order_status(payload: dict | None = Body(default=None), order_lookup: OrderLookup = Depends(get_order_lookup)) -> dict:
    body = payload or {}
    order_number = str(body.get("order_number") or "").strip()
    email = normalize_email(body.get("email"))
    if not order_number or not email:
        raise ClientInputError("Provide 'order_number' and 'email' in the body.")

    result = order_lookup.find_order(order_number, email)
    if not isinstance(result, Order):
        return {"found": False, "note": NOT_FOUND_NOTE}
    return result.model_dump()
