"""Pronunciation result entities - score, tier and diagnostics."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class FeedbackTier(Enum):
    """Coarse qualitative bucket derived from a score."""

    PERFECT = "Perfect!"
    EXCELLENT = "Excellent!"
    VERY_GOOD = "Very good!"
    GOOD = "Good, keep practicing"
    GETTING_THERE = "Getting there"
    KEEP_PRACTICING = "Keep practicing"

    @property
    def label(self) -> str:
        return self.value


@dataclass
class PronunciationResult:
    """Outcome of comparing a transcription with its target phrase."""

    target_text: str
    transcription: str
    score: int
    feedback_tier: FeedbackTier
    diagnostics: List[str] = field(default_factory=list)

    @property
    def feedback(self) -> str:
        """Display label of the tier."""
        return self.feedback_tier.label

    def to_dict(self) -> dict:
        """Serialize into the JSON shape expected by the practice client."""
        return {
            "target_text": self.target_text,
            "transcription": self.transcription,
            "score": self.score,
            "feedback": self.feedback,
            "errors": list(self.diagnostics),
        }


@dataclass
class PronunciationCheck:
    """A scored attempt plus the display forms of its target phrase."""

    result: PronunciationResult
    text_with_furigana: str
    romaji: str

    def to_dict(self) -> dict:
        data = self.result.to_dict()
        data["text_with_furigana"] = self.text_with_furigana
        data["romaji"] = self.romaji
        return data
