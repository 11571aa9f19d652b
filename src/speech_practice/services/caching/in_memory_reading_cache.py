"""In-memory reading cache for testing and single-process use."""

from datetime import datetime
from typing import List, Optional

from speech_practice.core import ReadingCacheEntry
from speech_practice.services.caching.reading_cache import ReadingCache


class InMemoryReadingCache(ReadingCache):
    """
    Simple dict-backed cache implementation.

    Used for testing and short-lived processes. No persistence.
    """

    def __init__(self):
        self._store: dict[str, ReadingCacheEntry] = {}

    def get(self, original_text: str) -> Optional[str]:
        entry = self._store.get(original_text)
        return entry.annotation_html if entry else None

    def put(self, original_text: str, annotation_html: str) -> None:
        self._store[original_text] = ReadingCacheEntry(
            original_text=original_text,
            annotation_html=annotation_html,
            updated_at=datetime.now(),
        )

    def delete(self, original_text: str) -> None:
        self._store.pop(original_text, None)

    def list_entries(self) -> List[ReadingCacheEntry]:
        return [self._store[key] for key in sorted(self._store)]
