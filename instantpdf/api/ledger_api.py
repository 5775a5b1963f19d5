#!/usr/bin/env python3
"""
Local ledger API for InstantPDF desktop and browser shells.

Serves the usage ledger of this profile over HTTP on localhost.
"""
import logging
import os
import time
from datetime import datetime
from typing import Optional

import redis
import uvicorn
from fastapi import FastAPI
from starlette.exceptions import HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import Counter, Histogram

from instantpdf.adapters.storage import InMemoryAdapter, JsonFileAdapter, RedisAdapter
from instantpdf.api.routes.health import create_health_router
from instantpdf.api.routes.ledger import create_ledger_router
from instantpdf.core.catalog import ToolCatalog
from instantpdf.core.ledger.service import LedgerService
from instantpdf.core.ports.persistence import PersistencePort

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

# Prometheus metrics
REQUEST_COUNT = Counter(
    "ledger_api_requests_total", "Total API requests", [
        "method", "endpoint", "status"])
REQUEST_DURATION = Histogram(
    "ledger_api_request_duration_seconds",
    "Request duration")

VERSION = "1.0.0"


def create_persistence(backend: Optional[str] = None) -> PersistencePort:
    """Build the storage adapter named by LEDGER_BACKEND (file, redis or memory)."""
    backend = (backend or os.environ.get("LEDGER_BACKEND", "file")).lower()
    if backend == "memory":
        return InMemoryAdapter()
    if backend == "redis":
        client = redis.Redis(
            host=os.environ.get("REDIS_HOST", "localhost"),
            port=int(os.environ.get("REDIS_PORT", "6379")),
            db=int(os.environ.get("REDIS_DB", "0")),
            decode_responses=False,
        )
        return RedisAdapter(client)
    if backend == "file":
        return JsonFileAdapter()
    raise ValueError(f"Unknown ledger backend: {backend}")


class LedgerAPI:
    """Ledger API with dependency injection"""

    def __init__(
        self,
        ledger: Optional[LedgerService] = None,
        persistence: Optional[PersistencePort] = None,
        catalog: Optional[ToolCatalog] = None,
    ):
        """Initialize API with dependency injection.

        Args:
            ledger: Ledger service (default: built from persistence)
            persistence: Storage adapter (default: from LEDGER_BACKEND)
            catalog: Tool catalog (default: shared instance)
        """
        self.ledger = ledger or LedgerService(persistence or create_persistence())
        self.catalog = catalog if catalog is not None else ToolCatalog.get_instance()
        self.start_time = time.time()

        self.app = FastAPI(
            title="InstantPDF Ledger API",
            description="Local usage stats, history, recent files and favorites",
            version=VERSION,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        self._setup_middleware()
        self._setup_routes()
        self._setup_error_handlers()

    def _setup_middleware(self):
        """Setup API middleware"""
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        @self.app.middleware("http")
        async def log_requests(request, call_next):
            start_time = time.time()
            response = await call_next(request)
            process_time = time.time() - start_time

            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=request.url.path,
                status=response.status_code,
            ).inc()
            REQUEST_DURATION.observe(process_time)

            logger.info(
                f"{request.method} {request.url.path} - {response.status_code} - {process_time:.3f}s"
            )
            return response

    def _setup_routes(self):
        """Setup API routes"""
        @self.app.get("/")
        async def root():
            return {
                "service": "InstantPDF Ledger API",
                "version": VERSION,
                "status": "operational",
                "docs": "/docs",
            }

        self.app.include_router(create_health_router(
            start_time=self.start_time,
            store_status_getter=lambda: {
                name: status.value for name, status in self.ledger.load_outcomes().items()
            },
            version=VERSION,
        ))
        self.app.include_router(create_ledger_router(self.ledger, self.catalog))

    def _setup_error_handlers(self):
        """Setup error handlers"""
        @self.app.exception_handler(HTTPException)
        async def http_exception_handler(request, exc):
            return JSONResponse(
                status_code=exc.status_code,
                content={
                    "error": f"HTTP_{exc.status_code}",
                    "message": exc.detail,
                    "timestamp": datetime.now().isoformat(),
                },
            )

        @self.app.exception_handler(ValueError)
        async def value_error_handler(request, exc):
            return JSONResponse(
                status_code=422,
                content={
                    "error": "INVALID_REQUEST",
                    "message": str(exc),
                    "timestamp": datetime.now().isoformat(),
                },
            )

        @self.app.exception_handler(Exception)
        async def global_exception_handler(request, exc):
            logger.error(f"Unhandled exception: {exc}", exc_info=True)
            return JSONResponse(
                status_code=500,
                content={
                    "error": "INTERNAL_SERVER_ERROR",
                    "message": "An internal server error occurred",
                    "timestamp": datetime.now().isoformat(),
                },
            )


def create_app(
    ledger: Optional[LedgerService] = None,
    persistence: Optional[PersistencePort] = None,
) -> FastAPI:
    """Create FastAPI application"""
    return LedgerAPI(ledger=ledger, persistence=persistence).app


def main():
    import argparse

    parser = argparse.ArgumentParser(description="InstantPDF local ledger API")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8765, help="Port to bind to")
    parser.add_argument("--backend", choices=["file", "redis", "memory"], help="Storage backend")

    args = parser.parse_args()
    app = create_app(persistence=create_persistence(args.backend))
    uvicorn.run(app, host=args.host, port=args.port)


# CLI entry point
if __name__ == "__main__":
    main()
