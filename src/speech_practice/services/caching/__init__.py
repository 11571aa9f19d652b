"""Caching services - abstract reading cache and concrete implementations."""

from speech_practice.services.caching.reading_cache import ReadingCache
from speech_practice.services.caching.in_memory_reading_cache import InMemoryReadingCache
from speech_practice.services.caching.sqlite_reading_cache import SqliteReadingCache

__all__ = [
    "ReadingCache",
    "InMemoryReadingCache",
    "SqliteReadingCache",
]
