# spellcore/DB/api.py
from __future__ import annotations
from typing import Protocol, Tuple


class WordStore(Protocol):
    # Read
    def contains(self, word: str) -> bool: ...
    def words(self) -> Tuple[str, ...]: ...
    def snapshot(self) -> Tuple[Tuple[str, ...], int]: ...
    def count(self) -> int: ...
    @property
    def version(self) -> int: ...
    # Create
    def insert(self, word: str) -> bool: ...
    # lifecycle
    def close(self) -> None: ...


def make_store(dsn: str) -> WordStore:
    """
    Factory:
      - file:///path -> FileStore (loaded now, rewritten on every accepted insert)
      - memory://    -> MemoryStore (empty, nothing persisted)
      - anything else is taken as a plain path to a word file
    """
    if dsn.startswith("memory://"):
        from .memory_store import MemoryStore
        return MemoryStore()

    # Lazy import to avoid a circular import
    from .file_store import FileStore
    return FileStore(dsn.removeprefix("file://"))
