"""Reading Cache abstraction - plugin interface for resolved furigana storage."""

from abc import ABC, abstractmethod
from typing import List, Optional

from speech_practice.core import ReadingCacheEntry


class ReadingCache(ABC):
    """
    Abstract interface for caching resolved reading annotations.

    Keys are literal source strings (a kanji run or a sentence); values are the
    ruby markup produced for them. Entries never expire: invalidation is a manual
    delete, e.g. after a bad reading was cached.
    """

    @abstractmethod
    def get(self, original_text: str) -> Optional[str]:
        """
        Retrieve the cached annotation for a source string.

        Args:
            original_text: Exact source string used as key.

        Returns:
            Annotation markup if found, else None.
        """
        pass

    @abstractmethod
    def put(self, original_text: str, annotation_html: str) -> None:
        """
        Store or overwrite an annotation. Must be durable once this returns.

        Args:
            original_text: Exact source string used as key.
            annotation_html: Ruby markup for the source string.
        """
        pass

    @abstractmethod
    def delete(self, original_text: str) -> None:
        """Delete a single entry. Missing keys are ignored."""
        pass

    @abstractmethod
    def list_entries(self) -> List[ReadingCacheEntry]:
        """List every cached entry, ordered by original text."""
        pass

    def keys(self) -> List[str]:
        """List every cached source string."""
        return [entry.original_text for entry in self.list_entries()]

    def purge_unannotated(self) -> List[str]:
        """
        Delete entries whose markup carries no ruby annotation.

        Returns:
            The deleted keys.
        """
        purged = [entry.original_text for entry in self.list_entries() if not entry.has_ruby]
        for original_text in purged:
            self.delete(original_text)
        return purged
