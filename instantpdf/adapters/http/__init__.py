"""HTTP access to the remote PDF service."""
from instantpdf.adapters.http.gateway import AuthenticatedGateway

__all__ = ["AuthenticatedGateway"]
