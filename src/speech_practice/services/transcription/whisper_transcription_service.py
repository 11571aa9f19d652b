"""Whisper Transcription Service - speech-to-text via the OpenAI API."""

import time
from typing import Optional

import openai
from openai import OpenAI

from speech_practice.services.transcription.transcription_service import (
    TranscriptionError,
    TranscriptionService,
)


class WhisperTranscriptionService(TranscriptionService):
    """
    Transcription service using OpenAI Whisper.

    Rate-limit errors are retried with exponential backoff; other API errors
    are raised as TranscriptionError.
    """

    MODEL_NAME = "whisper-1"

    LANGUAGE_CODES = {
        "japanese": "ja",
        "italian": "it",
    }

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[OpenAI] = None,
        max_retries: int = 3,
        retry_delay: float = 2.0,
        sleep=time.sleep,
    ):
        if client is None and not api_key:
            raise TranscriptionError("OPENAI_API_KEY not set")
        self._client = client or OpenAI(api_key=api_key, max_retries=0)
        self._max_retries = max_retries
        self._retry_delay = retry_delay
        self._sleep = sleep

    def language_code(self, language: Optional[str]) -> Optional[str]:
        """Map a language name to the ISO code Whisper expects."""
        if not language:
            return None
        language = language.strip().lower()
        return self.LANGUAGE_CODES.get(language, language)

    def transcribe(self, audio: bytes, language: Optional[str] = None) -> str:
        if not audio:
            return ""

        request = {
            "model": self.MODEL_NAME,
            "file": ("recording.webm", audio),
        }
        code = self.language_code(language)
        if code:
            request["language"] = code

        retry_delay = self._retry_delay
        attempt = 0

        while True:
            attempt += 1
            try:
                response = self._client.audio.transcriptions.create(**request)
                return (response.text or "").strip()
            except openai.RateLimitError as e:
                if attempt >= self._max_retries:
                    raise TranscriptionError("Transcription quota exceeded. Please try again later.") from e
                print(f"[Whisper] Rate limit on attempt {attempt}/{self._max_retries}. Retrying in {retry_delay} seconds...")
                self._sleep(retry_delay)
                retry_delay *= 2
            except openai.OpenAIError as e:
                raise TranscriptionError(f"Transcription failed: {e}") from e
