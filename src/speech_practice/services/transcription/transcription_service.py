"""Transcription Service - abstract speech-to-text capability."""

from abc import ABC, abstractmethod
from typing import Optional


class TranscriptionError(Exception):
    """Speech could not be transcribed."""


class TranscriptionService(ABC):
    """
    Abstract service turning recorded audio into text.

    Implementations (e.g., WhisperTranscriptionService) handle API calls.
    """

    @abstractmethod
    def transcribe(self, audio: bytes, language: Optional[str] = None) -> str:
        """
        Transcribe recorded audio.

        Args:
            audio: Encoded audio bytes (webm, mp3, wav...).
            language: Optional language hint ("japanese", "ja", ...).

        Returns:
            Transcribed text; empty when nothing was said.

        Raises:
            TranscriptionError: The service failed to produce a transcription.
        """
        pass
