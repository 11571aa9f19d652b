"""Transcription services - abstract interface and Whisper implementation."""

from speech_practice.services.transcription.transcription_service import (
    TranscriptionError,
    TranscriptionService,
)
from speech_practice.services.transcription.whisper_transcription_service import (
    WhisperTranscriptionService,
)

__all__ = [
    "TranscriptionError",
    "TranscriptionService",
    "WhisperTranscriptionService",
]
