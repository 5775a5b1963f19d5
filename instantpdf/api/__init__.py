"""
InstantPDF Ledger API

FastAPI-based local API for the usage ledger.
"""

from .ledger_api import create_app, LedgerAPI

__all__ = ["create_app", "LedgerAPI"]
