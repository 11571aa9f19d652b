"""Lesson content entities consumed by the annotator."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class LessonVocabItem:
    """A vocabulary row from a lesson."""

    jp: str
    en: str
    reading: Optional[str] = None


@dataclass
class GrammarExample:
    """An example sentence attached to a grammar point."""

    jp: str
    en: str
