# essaysync/DB/api.py
from __future__ import annotations
from typing import Protocol, Iterator, Optional

from ..models import Draft


class DraftStore(Protocol):
    # Create / Update
    def put(self, key: str, draft: Draft) -> None: ...
    # Read
    def get(self, key: str) -> Optional[Draft]: ...
    def keys(self) -> Iterator[str]: ...
    def count(self) -> int: ...
    # Delete
    def delete(self, key: str) -> None: ...
    # lifecycle
    def close(self) -> None: ...


def make_store(dsn: str) -> DraftStore:
    """
    Factory:
      - sqlite:///path -> SQLiteStore (file and table created on first use)
      - memory://      -> MemoryStore
    """
    if dsn.startswith("sqlite:///"):
        from .sqlite_store import SQLiteStore
        return SQLiteStore(dsn.removeprefix("sqlite:///"))

    if dsn.startswith("memory://"):
        from .memory_store import MemoryStore
        return MemoryStore()

    raise ValueError(f"Unsupported store DSN: {dsn}")
