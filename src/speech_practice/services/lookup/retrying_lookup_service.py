"""Retry decorator for reading lookups with bounded exponential backoff."""

import time
from typing import Callable, List

from speech_practice.core import ReadingCandidate
from speech_practice.services.lookup.reading_lookup_service import (
    RateLimitedError,
    ReadingLookupError,
    ReadingLookupService,
)


class RetryingLookupService(ReadingLookupService):
    """
    Retries a wrapped lookup on ReadingLookupError.

    Delays grow as base_delay * 2 ** (attempt - 1) and the number of attempts is
    capped by max_attempts, so one unavailable dictionary cannot hang a request.
    The last error is re-raised once the ceiling is reached.
    """

    def __init__(
        self,
        inner: ReadingLookupService,
        max_attempts: int = 4,
        base_delay: float = 0.5,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._inner = inner
        self._max_attempts = max_attempts
        self._base_delay = base_delay
        self._sleep = sleep

    def lookup(self, word: str) -> List[ReadingCandidate]:
        attempt = 0
        while True:
            attempt += 1
            try:
                return self._inner.lookup(word)
            except ReadingLookupError as exc:
                if attempt >= self._max_attempts:
                    print(f"[Furigana] All {self._max_attempts} attempts failed for: {word}")
                    raise

                delay = self._base_delay * 2 ** (attempt - 1)
                reason = "Rate limited" if isinstance(exc, RateLimitedError) else f"Lookup error ({exc})"
                print(f"[Furigana] {reason} on attempt {attempt}/{self._max_attempts}, retrying in {delay}s...")
                self._sleep(delay)
