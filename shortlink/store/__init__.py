"""Storage layer for shortlink."""

from .base import LinkStore
from .memory import MemoryLinkStore
from .postgres import PostgresLinkStore
from .cache import RedisCache
from .models import ShortLink, InsertResult, InsertStatus

__all__ = [
    "LinkStore",
    "MemoryLinkStore",
    "PostgresLinkStore",
    "RedisCache",
    "ShortLink",
    "InsertResult",
    "InsertStatus",
]
