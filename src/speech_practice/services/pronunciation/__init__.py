"""Pronunciation services - scoring transcriptions against target phrases."""

from speech_practice.services.pronunciation.pronunciation_scorer import (
    DEFAULT_RULES,
    ParticleRule,
    PronunciationScorer,
    ScoringConfig,
)

__all__ = [
    "DEFAULT_RULES",
    "ParticleRule",
    "PronunciationScorer",
    "ScoringConfig",
]
