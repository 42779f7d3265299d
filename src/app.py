"""POS FastAPI application.

Processes commands synchronously via HTTP. Every request runs inside the pos
domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from pos/domain.toml.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pos.domain import pos
from pos.utils.logging import add_context, clear_context

pos.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="POS API",
    description="Point of sale: catalogue, checkout, dashboard and payments",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Token-Expired"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the pos domain context for each request."""
    clear_context()
    add_context(method=request.method, path=request.url.path)
    with pos.domain_context():
        response = await call_next(request)
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from pos.api import register_pos_exception_handlers, routers  # noqa: E402

for router in routers:
    app.include_router(router)

register_pos_exception_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": {"name": pos.name}})
