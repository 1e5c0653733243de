"""
Account Records API - FastAPI application.
Serves /accounts over the JSON file store; logs each request and turns
unhandled errors (e.g. a corrupt store file) into a plain 500.
"""

import logging
import os
import sys
import time
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request as StarletteRequest

from app.api.routes import api_router
from app.core.config import get_settings

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Send app.main records to stdout in uvicorn's level prefix format."""
    if logger.handlers:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter("%(levelname)s:     %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)


_configure_logging()

# CORS origins are read once; middleware is configured at import
_settings = get_settings()


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One log line per request: method, path, status and elapsed milliseconds."""

    async def dispatch(self, request: StarletteRequest, call_next: Callable) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Account Records API (environment=%s)", _settings.ENVIRONMENT)
    logger.info("Account store: %s", _settings.accounts_data_file)
    logger.info("CORS origins: %s", ", ".join(_settings.cors_origins_list))
    yield
    logger.info("Account Records API stopped")


app = FastAPI(
    title="Account Records API",
    version="1.0.0",
    description="CRUD API for account records stored in a JSON file.",
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location"],
)


@app.middleware("http")
async def catch_exceptions(request: Request, call_next):
    """Unhandled errors become 500 {"detail": "Internal server error"}; the traceback is logged."""
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )


# Root and health
@app.get("/")
def root():
    return {
        "message": "Account Records API",
        "version": "1.0.0",
        "docs": "/docs",
        "endpoints": {
            "accounts": "/accounts",
            "search": "/accounts/search?name=",
        },
    }


@app.get("/health")
def health():
    return {"status": "healthy"}


app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", "8080"))
    uvicorn.run("app.main:app", host="0.0.0.0", port=port)
