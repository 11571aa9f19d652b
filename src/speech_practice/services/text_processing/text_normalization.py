"""Text normalization and segmentation utilities for scoring and annotation."""

import re
from typing import List, Optional

IDEOGRAPH_CLASS = "[一-龯々]"
"""CJK unified ideographs plus the iteration mark 々"""

IDEOGRAPH_PATTERN = re.compile(f"{IDEOGRAPH_CLASS}+")

RUBY_PATTERN = re.compile(r"<ruby>.*?</ruby>", re.DOTALL)

_SCORING_STRIP_PATTERN = re.compile(r"[\s。、，．？！.,?!]")


def normalize_for_scoring(text: Optional[str]) -> str:
    """
    Normalize a phrase before comparing pronunciation.

    Rules:
    - None is treated as an empty string
    - Remove all whitespace
    - Remove sentence punctuation (。 、 ， ． ？ ！ and . , ? !)
    - Case-fold Latin characters

    Args:
        text: Target phrase or transcription.

    Returns:
        Normalized text string.
    """
    if not text:
        return ""
    return _SCORING_STRIP_PATTERN.sub("", text).casefold()


def split_ruby_segments(text: str) -> List[str]:
    """
    Split text into alternating plain and ruby segments.

    Even indexes are plain text, odd indexes are complete <ruby>...</ruby> spans.
    """
    segments: List[str] = []
    position = 0
    for match in RUBY_PATTERN.finditer(text):
        segments.append(text[position:match.start()])
        segments.append(match.group(0))
        position = match.end()
    segments.append(text[position:])
    return segments


def find_ideograph_runs(text: str) -> List[str]:
    """
    Return the maximal ideograph runs of text, deduplicated in order of appearance.

    Runs already wrapped in ruby markup are not returned.
    """
    if not text:
        return []

    runs: List[str] = []
    seen = set()
    for segment in split_ruby_segments(text)[::2]:
        for run in IDEOGRAPH_PATTERN.findall(segment):
            if run not in seen:
                seen.add(run)
                runs.append(run)
    return runs


def has_ideographs(text: str) -> bool:
    return bool(text) and IDEOGRAPH_PATTERN.search(text) is not None
