"""Text processing services - normalization, segmentation, distance and romanization."""

from speech_practice.services.text_processing.edit_distance import levenshtein_distance
from speech_practice.services.text_processing.romaji import (
    add_particle_spacing,
    fix_particle_pronunciation,
    kana_to_romaji,
    strip_ruby_markup,
    to_romaji,
)
from speech_practice.services.text_processing.text_normalization import (
    IDEOGRAPH_PATTERN,
    RUBY_PATTERN,
    find_ideograph_runs,
    has_ideographs,
    normalize_for_scoring,
    split_ruby_segments,
)

__all__ = [
    "IDEOGRAPH_PATTERN",
    "RUBY_PATTERN",
    "add_particle_spacing",
    "find_ideograph_runs",
    "fix_particle_pronunciation",
    "has_ideographs",
    "kana_to_romaji",
    "levenshtein_distance",
    "normalize_for_scoring",
    "split_ruby_segments",
    "strip_ruby_markup",
    "to_romaji",
]
