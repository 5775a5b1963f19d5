"""Health check and monitoring routes"""
import time
from datetime import datetime
from typing import Callable, Dict, Optional

from fastapi import APIRouter
from fastapi.responses import Response
from prometheus_client import generate_latest

from instantpdf.api.schemas import HealthResponse


def create_health_router(
    start_time: float,
    store_status_getter: Optional[Callable[[], Dict[str, str]]] = None,
    version: str = "1.0.0",
) -> APIRouter:
    """Create health check router.

    Args:
        start_time: Server start time for uptime calculation
        store_status_getter: Callable returning the load status of each store
        version: Reported service version

    Returns:
        FastAPI router with health endpoints
    """
    router = APIRouter()

    @router.get("/api/v1/ledger/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint"""
        stores = store_status_getter() if store_status_getter else {}
        return HealthResponse(
            status="healthy",
            timestamp=datetime.now(),
            version=version,
            uptime=time.time() - start_time,
            stores=stores,
        )

    @router.get("/metrics")
    async def get_metrics():
        """Prometheus metrics endpoint"""
        return Response(generate_latest(), media_type="text/plain")

    return router
