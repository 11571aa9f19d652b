"""Dictionary lookup services - abstract interface, backends and retry policy."""

from speech_practice.services.lookup.reading_lookup_service import (
    RateLimitedError,
    ReadingLookupError,
    ReadingLookupService,
)
from speech_practice.services.lookup.jisho_lookup_service import JishoLookupService
from speech_practice.services.lookup.jamdict_lookup_service import JamdictLookupService
from speech_practice.services.lookup.retrying_lookup_service import RetryingLookupService

__all__ = [
    "ReadingLookupService",
    "ReadingLookupError",
    "RateLimitedError",
    "JishoLookupService",
    "JamdictLookupService",
    "RetryingLookupService",
]
