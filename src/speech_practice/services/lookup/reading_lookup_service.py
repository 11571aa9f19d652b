"""Reading Lookup Service - abstract text-to-reading dictionary capability."""

from abc import ABC, abstractmethod
from typing import List

from speech_practice.core import ReadingCandidate


class ReadingLookupError(Exception):
    """The dictionary could not be queried (network, bad status, bad payload)."""


class RateLimitedError(ReadingLookupError):
    """The dictionary refused the request because of rate limiting."""


class ReadingLookupService(ABC):
    """
    Abstract service resolving a word to dictionary headwords and readings.

    Implementations (e.g., JishoLookupService) handle transport. Retry policy is
    layered on top with RetryingLookupService.
    """

    @abstractmethod
    def lookup(self, word: str) -> List[ReadingCandidate]:
        """
        Look up candidate readings for a word.

        Args:
            word: Text to search for, typically a kanji run.

        Returns:
            Candidates in dictionary relevance order; empty when nothing matched.

        Raises:
            RateLimitedError: The service asked us to slow down.
            ReadingLookupError: Any other failure to obtain an answer.
        """
        pass
