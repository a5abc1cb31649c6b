"""
Traced — local discovery API

Serves context-aware vendor cards for the Traced local discovery pages.

Run with: uvicorn traced.main:app --port 8001 --reload
"""
import os
import time as _time_module
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.gzip import GZipMiddleware

# Configure structured logging FIRST (before any logger calls)
from .dependencies import LOG_LEVEL
from .middleware.structlog_config import configure as configure_logging
configure_logging(LOG_LEVEL)

import structlog

from .cache import app_cache
from .dependencies import get_catalog
from .middleware import RequestLoggingMiddleware, register_error_handlers
from .middleware.error_handler import CatalogError
from .routers import vendors_router

logger = structlog.get_logger("traced.api")

# Track server start time for uptime reporting
_server_start_time = _time_module.time()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: validate the vendor catalog before serving requests."""
    catalog = get_catalog()
    logger.info("startup_checks_passed", vendor_count=len(catalog))
    yield
    logger.info("Shutting down.")


API_TITLE = "Traced — Local Discovery API"
API_DESCRIPTION = """
Context-aware vendor cards for Traced local discovery.

### Core Endpoints

- **Vendor cards** - Filtered, score-ordered cards with notes chosen by the referring investigation
- **Filters** - Localities and vendor types present in the catalog
- **Vendor profile** - One vendor, with the same contextual note its card showed
"""
API_VERSION = "1.0.0"

_docs_enabled = os.environ.get("ENABLE_DOCS", "true").lower() == "true"
app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
    docs_url="/docs" if _docs_enabled else None,
    redoc_url="/redoc" if _docs_enabled else None,
    lifespan=lifespan,
)

# Register global error handlers
register_error_handlers(app)

# Request logging middleware (must be added before CORS/GZip so it wraps them)
app.add_middleware(RequestLoggingMiddleware)

# CORS middleware for frontend access
cors_origins = os.environ.get(
    "CORS_ORIGINS", "http://localhost:3009,http://127.0.0.1:3009"
).split(",")
if "*" in cors_origins:
    logger.warning("Wildcard CORS origin rejected for security; falling back to localhost defaults")
    cors_origins = ["http://localhost:3009", "http://127.0.0.1:3009"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["Content-Type", "Accept"],
)


@app.middleware("http")
async def security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response

# GZip compression for responses > 1KB
app.add_middleware(GZipMiddleware, minimum_size=1000)

app.include_router(vendors_router, prefix="/api/v1")


@app.get("/", tags=["root"])
async def root():
    """API root - returns basic info and links."""
    return {
        "name": API_TITLE,
        "version": API_VERSION,
        "docs": "/docs",
        "endpoints": {
            "vendor_cards": "/api/v1/vendors/cards",
            "vendor_filters": "/api/v1/vendors/filters",
            "vendor_profile": "/api/v1/vendors/{vendor_id}",
        },
    }


@app.get("/health", tags=["root"])
async def health_check():
    """Health check with catalog status and uptime."""
    uptime_seconds = round(_time_module.time() - _server_start_time)
    try:
        catalog = get_catalog()
    except CatalogError as exc:
        return JSONResponse(
            status_code=503,
            content={
                "status": "unavailable",
                "version": API_VERSION,
                "catalog": {"status": "invalid", "error": exc.message},
                "uptime_seconds": uptime_seconds,
            },
        )
    return {
        "status": "healthy",
        "version": API_VERSION,
        "catalog": {
            "status": "loaded",
            "localities": catalog.localities(),
            "vendor_count": len(catalog),
        },
        "uptime_seconds": uptime_seconds,
    }


@app.get("/metrics", tags=["root"])
async def metrics():
    """Application metrics for monitoring."""
    uptime_seconds = round(_time_module.time() - _server_start_time)
    return {
        "uptime_seconds": uptime_seconds,
        "cache": app_cache.stats(),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8001)
