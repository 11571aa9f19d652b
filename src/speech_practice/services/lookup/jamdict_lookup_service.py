"""Jamdict Lookup Service - offline reading candidates from JMdict."""

from typing import List, Optional

from jamdict import Jamdict
from jamdict.util import LookupResult

from speech_practice.core import ReadingCandidate
from speech_practice.services.lookup.reading_lookup_service import (
    ReadingLookupError,
    ReadingLookupService,
)


class JamdictLookupService(ReadingLookupService):
    """Wraps Jamdict so readings resolve without network access."""

    def __init__(self, jamdict: Optional[Jamdict] = None):
        self._jamdict = jamdict or Jamdict()

    def lookup(self, word: str) -> List[ReadingCandidate]:
        query = word.strip()
        if not query:
            return []

        try:
            result: LookupResult = self._jamdict.lookup(query)
        except Exception as exc:  # pragma: no cover - jamdict internals
            raise ReadingLookupError(f"Jamdict lookup failed for '{query}': {exc}") from exc

        candidates: List[ReadingCandidate] = []
        for entry in result.entries:
            if not entry.kanji_forms or not entry.kana_forms:
                continue
            reading = entry.kana_forms[0].text
            for form in entry.kanji_forms:
                candidates.append(ReadingCandidate(headword=form.text, reading=reading))
        return candidates
