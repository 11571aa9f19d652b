"""
Speech Practice - pronunciation scoring and furigana for a Japanese learner.

This package provides the core of a "repeat after me" practice loop:
- Furigana annotation backed by a dictionary lookup and a reading cache
- Pronunciation scoring against a target phrase
- Kana romanization for display
"""

__version__ = "0.1.0"

from speech_practice.core import FeedbackTier, PronunciationResult, ReadingCacheEntry

__all__ = [
    "FeedbackTier",
    "PronunciationResult",
    "ReadingCacheEntry",
]
