from __future__ import annotations

import logging
from uuid import uuid4

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from shopbridge.core.errors import ClientInputError, ShopBridgeError
from shopbridge.core.logging import configure_logging
from shopbridge.core.logging.context import log_context
from shopbridge.core.logging.redact import mask_secret, redact_string

from .deps import get_settings
from .routes_chat import router as chat_router
from .routes_orders import router as orders_router
from .routes_shopify import router as shopify_router

load_dotenv(override=False)

settings = get_settings()
configure_logging(settings.log_level, settings.log_dir if settings.log_to_file else None)
logger = logging.getLogger("shopbridge.api")
logger.info("startup_env", extra={"extra_fields": {"openai_api_key": mask_secret(settings.openai_api_key)}})

app = FastAPI(title="ShopBridge API")
app.mount("/static", StaticFiles(directory=settings.static_dir, check_dir=False), name="static")

app.include_router(shopify_router, tags=["shopify"])
app.include_router(orders_router, tags=["orders"])
app.include_router(chat_router, tags=["chat"])


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid4())
    with log_context(request_id=request_id, route=f"{request.method} {request.url.path}"):
        response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(ClientInputError)
async def client_input_error_handler(request: Request, exc: ClientInputError) -> JSONResponse:
    logger.info("bad_request", extra={"extra_fields": {"endpoint": f"{request.method} {request.url.path}", "error": str(exc)}})
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(ShopBridgeError)
async def shopbridge_error_handler(request: Request, exc: ShopBridgeError) -> JSONResponse:
    logger.error(
        "request_failed",
        extra={
            "extra_fields": {
                "endpoint": f"{request.method} {request.url.path}",
                "error_type": exc.__class__.__name__,
                "error": redact_string(str(exc)),
            }
        },
    )
    return JSONResponse(status_code=500, content={"error": str(exc)})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("request_crashed", extra={"extra_fields": {"endpoint": f"{request.method} {request.url.path}"}})
    return JSONResponse(status_code=500, content={"error": str(exc)})


@app.get("/healthz")
def healthz() -> dict[str, bool]:
    return {"ok": True}


@app.get("/", include_in_schema=False)
def index() -> FileResponse:
    return FileResponse(get_settings().static_dir / "index.html")


def run() -> None:
    uvicorn.run("shopbridge.apps.api.main:app", host="0.0.0.0", port=settings.port)
