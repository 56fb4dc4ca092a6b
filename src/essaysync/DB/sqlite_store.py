# essaysync/DB/sqlite_store.py
from __future__ import annotations
import os
import sqlite3
from typing import Iterator, Optional
from .api import DraftStore
from ..models import Draft

_SCHEMA = """
CREATE TABLE IF NOT EXISTS drafts (
  key TEXT PRIMARY KEY,
  essay TEXT NOT NULL,
  topic_source TEXT NOT NULL,
  custom_topic TEXT NOT NULL,
  topic TEXT NOT NULL,
  selected_topic_id TEXT NOT NULL,
  timestamp REAL NOT NULL
);
"""

_COLUMNS = "essay, topic_source, custom_topic, topic, selected_topic_id, timestamp"


class SQLiteStore(DraftStore):
    """Drafts in a single SQLite table, one row per key."""
    def __init__(self, db_path: str) -> None:
        os.makedirs(os.path.dirname(db_path) or ".", exist_ok=True)
        self.path = db_path
        self.conn: sqlite3.Connection = sqlite3.connect(db_path, check_same_thread=False)
        self.conn.executescript(_SCHEMA)

    # ---- Create / Update ----
    def put(self, key: str, draft: Draft) -> None:
        self.conn.execute(
            f"INSERT OR REPLACE INTO drafts(key, {_COLUMNS}) VALUES (?,?,?,?,?,?,?)",
            (
                key, draft.essay, draft.topic_source, draft.custom_topic,
                draft.topic, draft.selected_topic_id, float(draft.timestamp),
            ),
        )
        self.conn.commit()

    # ---- Read ----
    def get(self, key: str) -> Optional[Draft]:
        row = self.conn.execute(
            f"SELECT {_COLUMNS} FROM drafts WHERE key=?", (key,)
        ).fetchone()
        return Draft(*row) if row else None

    def keys(self) -> Iterator[str]:
        for (key,) in self.conn.execute("SELECT key FROM drafts ORDER BY key"):
            yield key

    def count(self) -> int:
        return self.conn.execute("SELECT COUNT(*) FROM drafts").fetchone()[0]

    # ---- Delete ----
    def delete(self, key: str) -> None:
        self.conn.execute("DELETE FROM drafts WHERE key=?", (key,))
        self.conn.commit()

    # ---- lifecycle ----
    def close(self) -> None:
        self.conn.close()
