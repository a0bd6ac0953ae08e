"""Inventory Catalog FastAPI application.

Web server that processes catalog commands synchronously via HTTP. Every
request runs inside the catalog domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import uuid

from catalog.domain import catalog
from catalog.utils.logging import add_context, clear_context
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV controls which config overlay is applied.
catalog.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Inventory Catalog API",
    description="Product catalog management, stock status and inventory health",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the catalog domain context for each request.

    Log lines emitted while handling the request carry a request id plus
    the method and path.
    """
    clear_context()
    add_context(
        request_id=request.headers.get("x-request-id") or uuid.uuid4().hex,
        method=request.method,
        path=request.url.path,
    )
    try:
        with catalog.domain_context():
            return await call_next(request)
    finally:
        clear_context()


# ---------------------------------------------------------------------------
# Routers and error mapping
# ---------------------------------------------------------------------------
from catalog.api import metrics_router, product_router, register_catalog_exception_handlers  # noqa: E402

app.include_router(product_router)
app.include_router(metrics_router)
register_catalog_exception_handlers(app)


# ---------------------------------------------------------------------------
# Liveness
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": catalog.name})
