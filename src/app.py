"""Warehouse Tracker FastAPI application.

Serves the warehousing domain over HTTP. Commands are processed
synchronously; each request runs inside the domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay in domain.toml:
#   - unset        → in-memory database
#   - "production" → PostgreSQL at DATABASE_URL
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from warehousing.config import seed_sample_data
from warehousing.domain import warehousing
from warehousing.utils.logging import add_context, clear_context, get_logger

warehousing.init()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if seed_sample_data():
        from warehousing.seed import load_sample_data

        with warehousing.domain_context():
            load_sample_data()
    yield


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Warehouse Tracker API",
    description="Warehouses, inventory items and capacity-aware transfers",
    lifespan=lifespan,
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
    """Push the domain context and bind request details into the log context."""
    clear_context()
    add_context(method=request.method, path=request.url.path)
    try:
        with warehousing.domain_context():
            return await call_next(request)
    finally:
        clear_context()


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from warehousing.api import (  # noqa: E402
    dashboard_router,
    item_router,
    register_error_handlers,
    warehouse_router,
)

app.include_router(warehouse_router, prefix="/api")
app.include_router(item_router, prefix="/api")
app.include_router(dashboard_router, prefix="/api")
register_error_handlers(app)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": warehousing.name})
