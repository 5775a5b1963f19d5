"""API route factories"""
from instantpdf.api.routes.health import create_health_router
from instantpdf.api.routes.ledger import create_ledger_router

__all__ = ["create_health_router", "create_ledger_router"]
