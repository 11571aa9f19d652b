"""Jisho Lookup Service - reading candidates from the jisho.org search API."""

from typing import List, Optional

import requests

from speech_practice.core import ReadingCandidate
from speech_practice.services.lookup.reading_lookup_service import (
    RateLimitedError,
    ReadingLookupError,
    ReadingLookupService,
)


class JishoLookupService(ReadingLookupService):
    """
    Queries https://jisho.org/api/v1/search/words for a keyword.

    Each call is a single HTTP attempt bounded by a timeout; wrap it in a
    RetryingLookupService to absorb rate limiting.
    """

    BASE_URL = "https://jisho.org/api/v1/search/words"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
        base_url: str = BASE_URL,
    ):
        self._session = session or requests.Session()
        self._timeout = timeout
        self._base_url = base_url

    def lookup(self, word: str) -> List[ReadingCandidate]:
        try:
            response = self._session.get(
                self._base_url,
                params={"keyword": word},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise ReadingLookupError(f"Jisho request failed for '{word}': {exc}") from exc

        if response.status_code == 429:
            raise RateLimitedError(f"Jisho rate limited the lookup for '{word}'")
        if not response.ok:
            raise ReadingLookupError(
                f"Jisho returned status {response.status_code} for '{word}'"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise ReadingLookupError(f"Jisho returned invalid JSON for '{word}'") from exc

        if not isinstance(payload, dict):
            raise ReadingLookupError(f"Jisho returned an unexpected payload for '{word}'")

        return self._parse_candidates(payload)

    def _parse_candidates(self, payload: dict) -> List[ReadingCandidate]:
        """Flatten data[].japanese[] into headword/reading pairs."""
        candidates: List[ReadingCandidate] = []
        for result in payload.get("data") or []:
            for japanese in result.get("japanese") or []:
                headword = japanese.get("word")
                reading = japanese.get("reading")
                if headword and reading:
                    candidates.append(ReadingCandidate(headword=headword, reading=reading))
        return candidates
