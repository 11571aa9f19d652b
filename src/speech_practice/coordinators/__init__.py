"""Coordinators - Orchestration layer composing services for one request."""

from .pronunciation_check_coordinator import PronunciationCheckCoordinator

__all__ = [
    "PronunciationCheckCoordinator",
]
