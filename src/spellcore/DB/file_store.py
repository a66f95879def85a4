# spellcore/DB/file_store.py
from __future__ import annotations
import logging
import os
from typing import List

from .memory_store import MemoryStore
from .storage import load_words, save_words
from ..config import DICTIONARY_CAPACITY
from ..errors import FatalStartup, InvalidWord, CapacityExceeded

log = logging.getLogger(__name__)


class FileStore(MemoryStore):
    """Word store backed by a plain word-per-line file, rewritten whole on each insert."""
    def __init__(self, path: str, *, capacity: int = DICTIONARY_CAPACITY) -> None:
        self.path = os.path.abspath(path)
        words = load_words(self.path)               # FatalStartup if unreadable
        try:
            super().__init__(words, capacity=capacity)
        except (InvalidWord, CapacityExceeded) as e:
            raise FatalStartup(f"Dictionary file {self.path} rejected: {e}") from e
        log.info("Loaded %d words from %s", self.count(), self.path)

    def _persist(self, words: List[str]) -> None:
        save_words(words, self.path)
