"""Persistence adapters for the ledger stores."""
from instantpdf.adapters.storage.json_file_adapter import JsonFileAdapter
from instantpdf.adapters.storage.memory_adapter import InMemoryAdapter
from instantpdf.adapters.storage.redis_adapter import RedisAdapter

__all__ = [
    "InMemoryAdapter",
    "JsonFileAdapter",
    "RedisAdapter",
]
