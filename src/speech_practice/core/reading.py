"""Reading entities - dictionary candidates and cached annotations."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class ReadingCandidate:
    """One headword/reading pair returned by a dictionary lookup."""

    headword: str
    reading: str


@dataclass
class ReadingCacheEntry:
    """A resolved annotation for a literal source string."""

    original_text: str
    """Kanji run (or sentence) used as the unique cache key"""

    annotation_html: str
    """Ruby markup such as <ruby>猫<rt>ねこ</rt></ruby>"""

    updated_at: datetime

    @property
    def has_ruby(self) -> bool:
        return "<ruby>" in self.annotation_html
