"""Pronunciation Check Coordinator - transcribe, score and annotate one attempt."""

from typing import Optional

from speech_practice.core import PronunciationCheck
from speech_practice.services import (
    FuriganaService,
    PronunciationScorer,
    TranscriptionError,
    TranscriptionService,
    to_romaji,
)


class PronunciationCheckCoordinator:
    """
    Runs the "repeat after me" check for a recorded attempt.

    The scorer and the annotator never call each other; this coordinator feeds
    the transcription to the scorer and renders the target for display.
    """

    def __init__(
        self,
        transcription_service: TranscriptionService,
        scorer: PronunciationScorer,
        furigana_service: FuriganaService,
    ) -> None:
        self._transcription = transcription_service
        self._scorer = scorer
        self._furigana = furigana_service

    def check(self, audio: bytes, target_text: str, language: Optional[str] = None) -> PronunciationCheck:
        """
        Score a recording against the target phrase.

        A failed transcription counts as silence, so the result reports that no
        audio was detected instead of raising.
        """
        heard = self.transcribe(audio, language)
        result = self._scorer.score(target_text, heard)

        text_with_furigana = self._furigana.annotate(target_text)
        return PronunciationCheck(
            result=result,
            text_with_furigana=text_with_furigana,
            romaji=to_romaji(target_text, text_with_furigana),
        )

    def transcribe(self, audio: bytes, language: Optional[str] = None) -> str:
        try:
            return self._transcription.transcribe(audio, language)
        except TranscriptionError as exc:
            print(f"[Pronunciation] Transcription failed, scoring as silence: {exc}")
            return ""
