"""Furigana Service - annotates ideograph runs with cached dictionary readings."""

import re
from typing import Iterable, List, Optional, Union

from speech_practice.core import GrammarExample, LessonVocabItem, ReadingCandidate
from speech_practice.services.caching import ReadingCache
from speech_practice.services.lookup import ReadingLookupError, ReadingLookupService
from speech_practice.services.text_processing import (
    find_ideograph_runs,
    has_ideographs,
    split_ruby_segments,
)
from speech_practice.services.text_processing.text_normalization import IDEOGRAPH_CLASS

_HIRAGANA_PATTERN = re.compile(r"[ぁ-ゖ]")
_IDEOGRAPH_CHAR = re.compile(IDEOGRAPH_CLASS)


def ruby(run: str, reading: str) -> str:
    """Wrap a run in ruby markup carrying its reading."""
    return f"<ruby>{run}<rt>{reading}</rt></ruby>"


def furigana_from_reading(jp: str, reading: Optional[str]) -> Optional[str]:
    """
    Build markup for a lesson item whose reading is already known.

    The ideograph stem (up to the first hiragana) carries the reading and the
    rest of the word stays outside as okurigana.

    Example: ("好き", "す") -> "<ruby>好<rt>す</rt></ruby>き"

    Returns:
        Markup, or None when there is no reading or no ideograph stem.
    """
    if not reading or not jp:
        return None

    stem_end = 0
    for i, char in enumerate(jp):
        if _IDEOGRAPH_CHAR.match(char):
            stem_end = i + 1
        elif _HIRAGANA_PATTERN.match(char):
            break

    if stem_end == 0:
        return None

    return ruby(jp[:stem_end], reading) + jp[stem_end:]


def choose_reading(run: str, candidates: List[ReadingCandidate]) -> Optional[str]:
    """
    Pick the reading for a run from dictionary candidates.

    An exact headword match wins. Otherwise the reading of the first headword
    containing the run is used as is, so a run taken from an inflected word
    carries that whole word's reading (食 with 食べる gives たべる).
    """
    for candidate in candidates:
        if candidate.headword == run and candidate.reading:
            return candidate.reading

    for candidate in candidates:
        if run in candidate.headword and candidate.reading:
            return candidate.reading

    return None


class FuriganaService:
    """
    Adds reading annotations to Japanese text.

    Each maximal ideograph run is resolved through the reading cache first and
    the dictionary lookup on a miss. Resolved runs are written to the cache
    immediately. Lookup failures leave the run as plain text; cache failures
    propagate.
    """

    def __init__(self, lookup_service: ReadingLookupService, cache: ReadingCache) -> None:
        self._lookup = lookup_service
        self._cache = cache

    def annotate(self, text: str) -> str:
        """
        Return text with every unannotated ideograph run wrapped in ruby markup.

        Runs are substituted longest first, and only where they stand as a whole
        run outside existing ruby spans, so a short run never rewrites the
        inside of an annotation. Annotating the output again changes nothing.
        """
        if not has_ideographs(text):
            return text or ""

        runs = sorted(find_ideograph_runs(text), key=len, reverse=True)
        working = text
        for run in runs:
            annotation = self._resolve_annotation(run)
            if annotation is None:
                continue
            working = self._substitute_run(working, run, annotation)
        return working

    def resolve_reading(self, run: str) -> Optional[str]:
        """Return the reading for a run, or None when it could not be resolved."""
        annotation = self._resolve_annotation(run)
        if annotation is None:
            return None
        match = re.search(r"<rt>([^<]*)</rt>", annotation)
        return match.group(1) if match else None

    def annotate_vocab(self, item: Union[LessonVocabItem, GrammarExample]) -> str:
        """Annotate a lesson item, preferring a reading stored with it."""
        stored = furigana_from_reading(item.jp, getattr(item, "reading", None))
        if stored is not None:
            return stored
        return self.annotate(item.jp)

    def find_uncached_runs(self, texts: Iterable[str]) -> List[str]:
        """List the ideograph runs of texts that have no cache entry yet."""
        missing: List[str] = []
        seen = set()
        for text in texts:
            for run in find_ideograph_runs(text or ""):
                if run in seen:
                    continue
                seen.add(run)
                if self._cache.get(run) is None:
                    missing.append(run)
        return missing

    def prefetch(self, texts: Iterable[str]) -> int:
        """
        Resolve every uncached run of texts so later annotations hit the cache.

        Returns:
            Number of runs newly resolved.
        """
        resolved = 0
        for run in self.find_uncached_runs(texts):
            if self._resolve_annotation(run) is not None:
                resolved += 1
        return resolved

    def _resolve_annotation(self, run: str) -> Optional[str]:
        cached = self._cache.get(run)
        if cached is not None:
            return cached

        try:
            candidates = self._lookup.lookup(run)
        except ReadingLookupError as exc:
            print(f"[Furigana] Lookup unavailable for '{run}', leaving it plain: {exc}")
            return None

        reading = choose_reading(run, candidates)
        if not reading:
            print(f"[Furigana] No reading found for: {run}")
            return None

        annotation = ruby(run, reading)
        self._cache.put(run, annotation)
        return annotation

    def _substitute_run(self, text: str, run: str, annotation: str) -> str:
        """Replace whole-run occurrences of run in the plain segments of text."""
        pattern = re.compile(
            f"(?<!{IDEOGRAPH_CLASS}){re.escape(run)}(?!{IDEOGRAPH_CLASS})"
        )
        segments = split_ruby_segments(text)
        for index in range(0, len(segments), 2):
            segments[index] = pattern.sub(lambda _: annotation, segments[index])
        return "".join(segments)
