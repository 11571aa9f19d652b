"""SQLite-backed reading cache with write-through persistence."""

import sqlite3
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from speech_practice.core import ReadingCacheEntry
from speech_practice.services.caching.reading_cache import ReadingCache


class SqliteReadingCache(ReadingCache):
    """
    Owns a SQLite connection holding the furigana_cache table.

    Every put is committed immediately, so concurrent processes sharing the
    database file converge on the same readings. Storage errors (sqlite3.Error)
    propagate to the caller.
    """

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)
        self.connection = sqlite3.connect(self.db_path)
        self.connection.row_factory = sqlite3.Row

    def ensure_schema(self) -> None:
        """Create the cache table if it does not exist."""
        cur = self.connection.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS furigana_cache (
                original_text TEXT PRIMARY KEY,
                furigana_html TEXT NOT NULL,
                updated_at TIMESTAMP NOT NULL
            );
            """
        )
        self.connection.commit()

    def get(self, original_text: str) -> Optional[str]:
        cur = self.connection.cursor()
        cur.execute(
            "SELECT furigana_html FROM furigana_cache WHERE original_text = ?",
            (original_text,),
        )
        row = cur.fetchone()
        return row["furigana_html"] if row else None

    def put(self, original_text: str, annotation_html: str) -> None:
        cur = self.connection.cursor()
        cur.execute(
            """
            INSERT INTO furigana_cache (original_text, furigana_html, updated_at)
            VALUES (?, ?, ?)
            ON CONFLICT(original_text) DO UPDATE SET
                furigana_html = excluded.furigana_html,
                updated_at = excluded.updated_at
            """,
            (original_text, annotation_html, datetime.now().isoformat()),
        )
        self.connection.commit()

    def delete(self, original_text: str) -> None:
        cur = self.connection.cursor()
        cur.execute("DELETE FROM furigana_cache WHERE original_text = ?", (original_text,))
        self.connection.commit()

    def list_entries(self) -> List[ReadingCacheEntry]:
        cur = self.connection.cursor()
        cur.execute(
            """
            SELECT original_text, furigana_html, updated_at
            FROM furigana_cache
            ORDER BY original_text
            """
        )
        return [
            ReadingCacheEntry(
                original_text=row["original_text"],
                annotation_html=row["furigana_html"],
                updated_at=datetime.fromisoformat(row["updated_at"]),
            )
            for row in cur.fetchall()
        ]

    def close(self) -> None:
        self.connection.close()
