"""Services layer - business logic and external integrations."""

from speech_practice.services.furigana_service import (
    FuriganaService,
    choose_reading,
    furigana_from_reading,
    ruby,
)
from speech_practice.services.settings_manager import SettingsManager

# Text processing services
from speech_practice.services.text_processing import (
    find_ideograph_runs,
    levenshtein_distance,
    normalize_for_scoring,
    to_romaji,
)

# Caching services
from speech_practice.services.caching import InMemoryReadingCache, ReadingCache, SqliteReadingCache

# Lookup services
from speech_practice.services.lookup import (
    JamdictLookupService,
    JishoLookupService,
    RateLimitedError,
    ReadingLookupError,
    ReadingLookupService,
    RetryingLookupService,
)

# Pronunciation services
from speech_practice.services.pronunciation import (
    DEFAULT_RULES,
    ParticleRule,
    PronunciationScorer,
    ScoringConfig,
)

# Transcription services
from speech_practice.services.transcription import (
    TranscriptionError,
    TranscriptionService,
    WhisperTranscriptionService,
)

__all__ = [
    "FuriganaService",
    "choose_reading",
    "furigana_from_reading",
    "ruby",
    "SettingsManager",
    "find_ideograph_runs",
    "levenshtein_distance",
    "normalize_for_scoring",
    "to_romaji",
    "ReadingCache",
    "InMemoryReadingCache",
    "SqliteReadingCache",
    "ReadingLookupService",
    "ReadingLookupError",
    "RateLimitedError",
    "JishoLookupService",
    "JamdictLookupService",
    "RetryingLookupService",
    "DEFAULT_RULES",
    "ParticleRule",
    "PronunciationScorer",
    "ScoringConfig",
    "TranscriptionError",
    "TranscriptionService",
    "WhisperTranscriptionService",
]
