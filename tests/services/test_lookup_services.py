"""Unit tests for lookup backends and the retry decorator."""

from types import SimpleNamespace
from typing import List
from unittest.mock import MagicMock

import pytest
import requests

from speech_practice.core import ReadingCandidate
from speech_practice.services import (
    JamdictLookupService,
    JishoLookupService,
    RateLimitedError,
    ReadingLookupError,
    ReadingLookupService,
    RetryingLookupService,
)

pytestmark = pytest.mark.service


def _response(status_code: int, payload=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.json.return_value = payload
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


class TestJishoLookupService:
    """Tests for the jisho.org HTTP backend."""

    def test_parses_candidates(self, session):
        session.get.return_value = _response(
            200,
            {
                "data": [
                    {"japanese": [{"word": "日本", "reading": "にほん"}, {"word": "日本", "reading": "にっぽん"}]},
                    {"japanese": [{"word": "日本語", "reading": "にほんご"}]},
                    {"japanese": [{"reading": "にほん"}]},
                ]
            },
        )
        service = JishoLookupService(session=session, timeout=5)

        candidates = service.lookup("日本")

        assert candidates == [
            ReadingCandidate("日本", "にほん"),
            ReadingCandidate("日本", "にっぽん"),
            ReadingCandidate("日本語", "にほんご"),
        ]
        session.get.assert_called_once_with(
            JishoLookupService.BASE_URL, params={"keyword": "日本"}, timeout=5
        )

    def test_empty_data_returns_empty_list(self, session):
        session.get.return_value = _response(200, {"data": []})
        assert JishoLookupService(session=session).lookup("謎") == []

    def test_rate_limit_raises_rate_limited(self, session):
        session.get.return_value = _response(429)
        with pytest.raises(RateLimitedError):
            JishoLookupService(session=session).lookup("猫")

    def test_server_error_raises_lookup_error(self, session):
        session.get.return_value = _response(503)
        with pytest.raises(ReadingLookupError) as excinfo:
            JishoLookupService(session=session).lookup("猫")
        assert not isinstance(excinfo.value, RateLimitedError)

    def test_network_error_raises_lookup_error(self, session):
        session.get.side_effect = requests.ConnectionError("offline")
        with pytest.raises(ReadingLookupError):
            JishoLookupService(session=session).lookup("猫")

    def test_invalid_json_raises_lookup_error(self, session):
        response = _response(200)
        response.json.side_effect = ValueError("not json")
        session.get.return_value = response
        with pytest.raises(ReadingLookupError):
            JishoLookupService(session=session).lookup("猫")

    def test_non_object_payload_raises_lookup_error(self, session):
        session.get.return_value = _response(200, ["unexpected"])
        with pytest.raises(ReadingLookupError):
            JishoLookupService(session=session).lookup("猫")


class TestJamdictLookupService:
    """Tests for the offline backend with a stubbed Jamdict."""

    def _entry(self, kanji: List[str], kana: List[str]):
        return SimpleNamespace(
            kanji_forms=[SimpleNamespace(text=text) for text in kanji],
            kana_forms=[SimpleNamespace(text=text) for text in kana],
        )

    def test_builds_candidates_from_kanji_forms(self):
        jamdict = MagicMock()
        jamdict.lookup.return_value = SimpleNamespace(
            entries=[
                self._entry(["日本", "日本國"], ["にほん", "にっぽん"]),
                self._entry([], ["にほん"]),
            ]
        )

        candidates = JamdictLookupService(jamdict=jamdict).lookup("日本")

        assert candidates == [
            ReadingCandidate("日本", "にほん"),
            ReadingCandidate("日本國", "にほん"),
        ]

    def test_blank_query_skips_lookup(self):
        jamdict = MagicMock()
        assert JamdictLookupService(jamdict=jamdict).lookup("  ") == []
        jamdict.lookup.assert_not_called()


class ScriptedLookupService(ReadingLookupService):
    """Raises the scripted errors in turn, then answers."""

    def __init__(self, errors, answer):
        self.errors = list(errors)
        self.answer = answer
        self.calls = 0

    def lookup(self, word):
        self.calls += 1
        if self.errors:
            raise self.errors.pop(0)
        return self.answer


class TestRetryingLookupService:
    """Bounded exponential backoff."""

    def test_success_needs_no_retry(self):
        delays = []
        inner = ScriptedLookupService([], [ReadingCandidate("猫", "ねこ")])
        service = RetryingLookupService(inner, sleep=delays.append)

        assert service.lookup("猫") == [ReadingCandidate("猫", "ねこ")]
        assert inner.calls == 1
        assert delays == []

    def test_retries_rate_limit_with_exponential_delays(self):
        delays = []
        inner = ScriptedLookupService(
            [RateLimitedError("429"), RateLimitedError("429"), ReadingLookupError("502")],
            [ReadingCandidate("猫", "ねこ")],
        )
        service = RetryingLookupService(inner, max_attempts=4, base_delay=0.5, sleep=delays.append)

        assert service.lookup("猫") == [ReadingCandidate("猫", "ねこ")]
        assert inner.calls == 4
        assert delays == [0.5, 1.0, 2.0]

    def test_gives_up_after_max_attempts(self):
        delays = []
        inner = ScriptedLookupService([RateLimitedError("429")] * 5, [])
        service = RetryingLookupService(inner, max_attempts=3, base_delay=1, sleep=delays.append)

        with pytest.raises(RateLimitedError):
            service.lookup("猫")
        assert inner.calls == 3
        assert delays == [1, 2]

    def test_other_exceptions_are_not_retried(self):
        inner = ScriptedLookupService([KeyError("bug")], [])
        service = RetryingLookupService(inner, sleep=lambda _: None)

        with pytest.raises(KeyError):
            service.lookup("猫")
        assert inner.calls == 1

    def test_rejects_zero_attempts(self):
        with pytest.raises(ValueError):
            RetryingLookupService(ScriptedLookupService([], []), max_attempts=0)
