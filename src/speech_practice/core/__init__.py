"""Domain layer - Pure entities for lessons, readings and scoring."""

from .lesson_items import GrammarExample, LessonVocabItem
from .pronunciation_result import FeedbackTier, PronunciationCheck, PronunciationResult
from .reading import ReadingCacheEntry, ReadingCandidate

__all__ = [
    "FeedbackTier",
    "GrammarExample",
    "LessonVocabItem",
    "PronunciationCheck",
    "PronunciationResult",
    "ReadingCacheEntry",
    "ReadingCandidate",
]
