from __future__ import annotations

from fastapi import APIRouter, Body, Depends

from shopbridge.core.chat.router import ChatRouter

from .deps import get_chat_router

router = APIRouter()


@router.post("/chat")
def chat(payload: dict | None = Body(default=None), chat_router: ChatRouter = Depends(get_chat_router)) -> dict:
    body = payload or {}
    reply = chat_router.handle(
        body.get("message", ""),
        mode=body.get("mode", "free"),
        product=body.get("product") or {},
    )
    response = reply.model_dump()
    if response["order"] is None:
        response.pop("order")
    return response
