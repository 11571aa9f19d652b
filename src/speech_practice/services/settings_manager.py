"""Settings Manager - Handles API keys, cache location and tuning parameters."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


class SettingsManager:
    """
    Manages settings read from the environment.

    Values come from a .env file in the project root, with real environment
    variables taking precedence.
    """

    DEFAULT_CACHE_PATH = "furigana-cache.db"
    DEFAULT_LOOKUP_BACKEND = "jisho"
    LOOKUP_BACKENDS = ("jisho", "jamdict")

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def _get(self, name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None

    def _get_int(self, name: str, default: int) -> int:
        value = self._get(name)
        try:
            return int(value) if value is not None else default
        except ValueError:
            return default

    def _get_float(self, name: str, default: float) -> float:
        value = self._get(name)
        try:
            return float(value) if value is not None else default
        except ValueError:
            return default

    def get_openai_api_key(self) -> Optional[str]:
        """Get the OpenAI API key used for Whisper transcription."""
        return self._get("OPENAI_API_KEY")

    def get_reading_cache_path(self) -> Path:
        """SQLite file holding resolved furigana readings."""
        return Path(self._get("READING_CACHE_PATH") or self.DEFAULT_CACHE_PATH)

    def get_lookup_backend(self) -> str:
        """Dictionary backend name: "jisho" (HTTP) or "jamdict" (offline)."""
        backend = (self._get("READING_LOOKUP_BACKEND") or self.DEFAULT_LOOKUP_BACKEND).lower()
        return backend if backend in self.LOOKUP_BACKENDS else self.DEFAULT_LOOKUP_BACKEND

    def get_lookup_max_attempts(self) -> int:
        return max(1, self._get_int("READING_LOOKUP_MAX_ATTEMPTS", 4))

    def get_lookup_timeout(self) -> float:
        """Per-attempt timeout in seconds for dictionary requests."""
        return self._get_float("READING_LOOKUP_TIMEOUT", 10.0)

    def get_forgiveness_multiplier(self) -> float:
        return self._get_float("PRONUNCIATION_FORGIVENESS", 1.1)

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)
