"""Translate domain errors into HTTP responses.

Protean's handlers cover plain ``ValidationError`` and ``ObjectNotFoundError``.
The handlers here add the offending field and stock figures for cart
problems and map collaborator failures to server errors.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from pos.errors import BlobStoreFailure, GatewayFailure, InvalidRequest
from pos.utils.logging import get_logger

logger = get_logger(__name__)

_STOCK_CONTEXT = ("item_id", "current_stock", "requested", "limit")


async def invalid_request_handler(request: Request, exc: InvalidRequest) -> JSONResponse:
    content = {"error": exc.messages, "field": exc.field}
    for attr in _STOCK_CONTEXT:
        if hasattr(exc, attr):
            content[attr] = getattr(exc, attr)
    return JSONResponse(status_code=400, content=content)


async def gateway_failure_handler(request: Request, exc: GatewayFailure) -> JSONResponse:
    logger.error("gateway_failure", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=502, content={"error": exc.message})


async def blob_store_failure_handler(request: Request, exc: BlobStoreFailure) -> JSONResponse:
    logger.error("blob_store_failure", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=500, content={"error": exc.message})


def register_pos_exception_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)
    app.add_exception_handler(InvalidRequest, invalid_request_handler)
    app.add_exception_handler(GatewayFailure, gateway_failure_handler)
    app.add_exception_handler(BlobStoreFailure, blob_store_failure_handler)
