"""Pronunciation Scorer - edit-distance score, feedback tier and diagnostics."""

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from speech_practice.core import FeedbackTier, PronunciationResult
from speech_practice.services.text_processing import levenshtein_distance, normalize_for_scoring

NO_AUDIO_DIAGNOSTIC = "No audio detected"
LENGTH_DIAGNOSTIC = "Sentence length differs"
MINOR_DIFFERENCES_DIAGNOSTIC = "Minor differences"


@dataclass(frozen=True)
class ParticleRule:
    """Flags a grammatical marker present in the target but missing when heard."""

    marker: str
    message: str


DEFAULT_RULES: Tuple[ParticleRule, ...] = (
    ParticleRule("ます", "Missing polite ending 'ます' (masu)"),
    ParticleRule("です", "Missing polite copula 'です' (desu)"),
    ParticleRule("ている", "Missing progressive form 'ている' (te iru)"),
    ParticleRule("を", "Missing object particle 'を' (o)"),
    ParticleRule("は", "Missing topic particle 'は' (wa)"),
    ParticleRule("が", "Missing subject particle 'が' (ga)"),
    ParticleRule("に", "Missing particle 'に' (ni)"),
    ParticleRule("へ", "Missing direction particle 'へ' (e)"),
    ParticleRule("で", "Missing particle 'で' (de)"),
)

# (minimum score, tier), checked top down
TIER_THRESHOLDS: Tuple[Tuple[int, FeedbackTier], ...] = (
    (85, FeedbackTier.EXCELLENT),
    (70, FeedbackTier.VERY_GOOD),
    (50, FeedbackTier.GOOD),
    (30, FeedbackTier.GETTING_THERE),
)


@dataclass(frozen=True)
class ScoringConfig:
    """Tunable scoring parameters."""

    forgiveness_multiplier: float = 1.1
    length_tolerance: int = 2
    rules: Tuple[ParticleRule, ...] = DEFAULT_RULES


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class PronunciationScorer:
    """
    Compares a transcription with its target phrase.

    Pure computation: no I/O, and every input (including empty or None
    strings) yields a result.
    """

    def __init__(self, config: Optional[ScoringConfig] = None) -> None:
        self.config = config or ScoringConfig()

    def score(self, target_text: Optional[str], heard_text: Optional[str]) -> PronunciationResult:
        """
        Score how closely heard_text matches target_text.

        Args:
            target_text: Phrase the learner was asked to repeat.
            heard_text: Transcription of the recording; empty when nothing was heard.

        Returns:
            PronunciationResult with a score in [0, 100], its tier and diagnostics.
        """
        target_text = target_text or ""
        heard_text = heard_text or ""
        target = normalize_for_scoring(target_text)
        heard = normalize_for_scoring(heard_text)

        if target == heard:
            return PronunciationResult(
                target_text=target_text,
                transcription=heard_text,
                score=100,
                feedback_tier=FeedbackTier.PERFECT,
                diagnostics=[],
            )

        if not heard:
            return PronunciationResult(
                target_text=target_text,
                transcription=heard_text,
                score=0,
                feedback_tier=self.classify(0),
                diagnostics=[NO_AUDIO_DIAGNOSTIC],
            )

        distance = levenshtein_distance(target, heard)
        max_len = max(len(target), len(heard))
        raw_score = _round_half_up((max_len - distance) / max_len * 100)
        final_score = min(100, _round_half_up(raw_score * self.config.forgiveness_multiplier))
        final_score = max(0, final_score)

        return PronunciationResult(
            target_text=target_text,
            transcription=heard_text,
            score=final_score,
            feedback_tier=self.classify(final_score),
            diagnostics=self.diagnose(target, heard),
        )

    def classify(self, score: int) -> FeedbackTier:
        """Map a score to its feedback tier (thresholds 85, 70, 50, 30)."""
        for minimum, tier in TIER_THRESHOLDS:
            if score >= minimum:
                return tier
        return FeedbackTier.KEEP_PRACTICING

    def diagnose(self, target: str, heard: str) -> List[str]:
        """
        Explain the gap between two normalized texts.

        Rules fire independently in their configured order. The list is never
        empty for differing texts.
        """
        diagnostics = [
            rule.message
            for rule in self.config.rules
            if rule.marker in target and rule.marker not in heard
        ]

        if abs(len(target) - len(heard)) > self.config.length_tolerance:
            diagnostics.append(LENGTH_DIAGNOSTIC)

        if not diagnostics and target != heard:
            diagnostics.append(MINOR_DIFFERENCES_DIAGNOSTIC)

        return diagnostics
