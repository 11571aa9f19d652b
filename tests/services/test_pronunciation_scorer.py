"""Unit tests for PronunciationScorer."""

import pytest

from speech_practice.core import FeedbackTier, PronunciationResult
from speech_practice.services import ParticleRule, PronunciationScorer, ScoringConfig


@pytest.fixture
def scorer():
    """Provide a scorer with default configuration."""
    return PronunciationScorer()


class TestFastPaths:
    """Exact-match and nothing-heard shortcuts."""

    def test_exact_match_scores_100_without_diagnostics(self, scorer):
        result = scorer.score("ねこです", "ねこです")

        assert isinstance(result, PronunciationResult)
        assert result.score == 100
        assert result.feedback_tier is FeedbackTier.PERFECT
        assert result.diagnostics == []

    def test_match_ignores_punctuation_whitespace_and_case(self, scorer):
        result = scorer.score("ねこです。", " ねこ です ")
        assert result.score == 100
        assert result.diagnostics == []

        result = scorer.score("Buongiorno!", "buongiorno")
        assert result.score == 100

    def test_empty_heard_scores_zero(self, scorer):
        result = scorer.score("ねこです", "")

        assert result.score == 0
        assert result.feedback_tier is FeedbackTier.KEEP_PRACTICING
        assert result.diagnostics == ["No audio detected"]

    def test_punctuation_only_heard_counts_as_empty(self, scorer):
        result = scorer.score("ねこです", "。")
        assert result.score == 0
        assert result.diagnostics == ["No audio detected"]

    def test_none_heard_is_treated_as_empty(self, scorer):
        result = scorer.score("ねこです", None)
        assert result.score == 0
        assert result.transcription == ""

    def test_result_keeps_original_strings(self, scorer):
        result = scorer.score("ねこです。", "ねこでした")
        assert result.target_text == "ねこです。"
        assert result.transcription == "ねこでした"


class TestGeneralScore:
    """Edit-distance scoring with forgiveness boost."""

    def test_no_shared_characters_scores_zero(self, scorer):
        result = scorer.score("ねこ", "いぬ")
        assert result.score == 0
        assert result.feedback_tier is FeedbackTier.KEEP_PRACTICING

    def test_single_substitution_is_boosted(self, scorer):
        """distance 1 of 4 -> raw 75 -> round(75 * 1.1) = 83."""
        result = scorer.score("たべます", "たべまず")
        assert result.score == 83
        assert result.feedback_tier is FeedbackTier.VERY_GOOD

    def test_boost_is_clamped_to_100(self, scorer):
        """distance 1 of 20 -> raw 95 -> 104.5 clamped to 100."""
        target = "わたしはまいにちにほんごをべんきょうした"
        heard = target[:-1] + "す"
        assert len(target) == 20

        result = scorer.score(target, heard)
        assert result.score == 100
        assert result.feedback_tier is FeedbackTier.EXCELLENT
        assert result.diagnostics

    def test_longer_heard_uses_its_length(self, scorer):
        """distance 2 of 4 (heard longer) -> raw 50 -> 55."""
        result = scorer.score("ねこ", "ねこだよ")
        assert result.score == 55

    def test_multiplier_is_configurable(self):
        scorer = PronunciationScorer(ScoringConfig(forgiveness_multiplier=1.0))
        assert scorer.score("たべます", "たべまず").score == 75

    @pytest.mark.parametrize(
        "target, heard",
        [("あ", "いいいいいいいいい"), ("ねこ", "ね"), ("a", "b"), ("長い文です", "x")],
    )
    def test_score_always_within_bounds(self, scorer, target, heard):
        result = scorer.score(target, heard)
        assert isinstance(result.score, int)
        assert 0 <= result.score <= 100
        assert result.diagnostics


class TestClassify:
    """Tier thresholds at 85, 70, 50 and 30."""

    @pytest.mark.parametrize(
        "score, tier",
        [
            (100, FeedbackTier.EXCELLENT),
            (85, FeedbackTier.EXCELLENT),
            (84, FeedbackTier.VERY_GOOD),
            (70, FeedbackTier.VERY_GOOD),
            (69, FeedbackTier.GOOD),
            (50, FeedbackTier.GOOD),
            (49, FeedbackTier.GETTING_THERE),
            (30, FeedbackTier.GETTING_THERE),
            (29, FeedbackTier.KEEP_PRACTICING),
            (0, FeedbackTier.KEEP_PRACTICING),
        ],
    )
    def test_tier_boundaries(self, scorer, score, tier):
        assert scorer.classify(score) is tier


class TestDiagnostics:
    """Particle battery, length rule and fallback."""

    def test_missing_direction_particle_is_named(self, scorer):
        result = scorer.score("がっこうへいきます", "がっこういきます")

        assert any("へ" in message for message in result.diagnostics)
        assert "Sentence length differs" not in result.diagnostics

    def test_missing_polite_ending(self, scorer):
        result = scorer.score("たべます", "たべる")
        assert "Missing polite ending 'ます' (masu)" in result.diagnostics

    def test_missing_progressive_form(self, scorer):
        result = scorer.score("よんでいます", "よみます")
        assert "Missing progressive form 'ている' (te iru)" not in result.diagnostics

        result = scorer.score("たべている", "たべる")
        assert "Missing progressive form 'ている' (te iru)" in result.diagnostics

    def test_rules_fire_independently_in_order(self, scorer):
        result = scorer.score("ほんをよみます", "ほんよむ")

        assert result.diagnostics[:2] == [
            "Missing polite ending 'ます' (masu)",
            "Missing object particle 'を' (o)",
        ]

    def test_length_rule_fires_above_tolerance(self, scorer):
        result = scorer.score("きょうはいいてんきですね", "きょう")
        assert "Sentence length differs" in result.diagnostics

    def test_length_rule_does_not_fire_within_tolerance(self, scorer):
        result = scorer.score("ねこ", "ねこちゃ")
        assert result.diagnostics == ["Minor differences"]

    def test_fallback_when_no_rule_fires(self, scorer):
        result = scorer.score("たべまず", "たべます")
        assert result.diagnostics == ["Minor differences"]

    def test_custom_rules(self):
        scorer = PronunciationScorer(
            ScoringConfig(rules=(ParticleRule("よ", "Missing sentence ending 'よ'"),))
        )
        result = scorer.score("いいよ", "いい")
        assert result.diagnostics == ["Missing sentence ending 'よ'"]


def test_to_dict_shape(scorer):
    data = scorer.score("ねこです", "").to_dict()
    assert data == {
        "target_text": "ねこです",
        "transcription": "",
        "score": 0,
        "feedback": "Keep practicing",
        "errors": ["No audio detected"],
    }
