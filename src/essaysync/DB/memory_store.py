# essaysync/DB/memory_store.py
from __future__ import annotations
from typing import Dict, Iterator, Optional
from .api import DraftStore
from ..models import Draft

class MemoryStore(DraftStore):
    """Simple in-memory store (useful for tests or ephemeral runs)."""
    def __init__(self) -> None:
        self._rows: Dict[str, Draft] = {}

    def put(self, key: str, draft: Draft) -> None:
        self._rows[key] = draft

    def get(self, key: str) -> Optional[Draft]:
        return self._rows.get(key)

    def keys(self) -> Iterator[str]:
        return iter(list(self._rows))

    def count(self) -> int:
        return len(self._rows)

    def delete(self, key: str) -> None:
        self._rows.pop(key, None)

    def close(self) -> None:
        self._rows.clear()
