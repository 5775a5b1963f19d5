"""Abstract interfaces for external dependencies."""
from instantpdf.core.ports.persistence import LoadResult, LoadStatus, PersistencePort

__all__ = [
    "LoadResult",
    "LoadStatus",
    "PersistencePort",
]
