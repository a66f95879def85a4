# spellcore/DB/memory_store.py
from __future__ import annotations
import logging
import threading
from typing import Iterable, List, Optional, Tuple

from .api import WordStore
from ..config import DICTIONARY_CAPACITY, MAX_WORD_LENGTH
from ..errors import CapacityExceeded, InvalidWord, StoreWriteError

log = logging.getLogger(__name__)


def check_word(word: str) -> None:
    if not word:
        raise InvalidWord("empty word")
    if len(word) > MAX_WORD_LENGTH:
        raise InvalidWord(f"word longer than {MAX_WORD_LENGTH} characters: {word!r}")
    if word != word.lower():
        raise InvalidWord(f"word is not lowercase: {word!r}")


class MemoryStore(WordStore):
    """
    Sorted, capacity-bounded word list guarded by one lock.

    The lock belongs to the instance: every session that shares the store
    shares the lock, so there is exactly one writer at a time per process.
    Subclasses persist by overriding _persist().
    """
    def __init__(self, words: Optional[Iterable[str]] = None, *,
                 capacity: int = DICTIONARY_CAPACITY) -> None:
        self._lock = threading.Lock()
        self._capacity = int(capacity)
        self._words: List[str] = []
        self._version = 0
        if words is not None:
            self._seed(words)

    def _seed(self, words: Iterable[str]) -> None:
        items = [w.lower() for w in words]
        for w in items:
            check_word(w)
        if len(items) > self._capacity:
            raise CapacityExceeded(
                f"{len(items)} words exceed the dictionary capacity of {self._capacity}"
            )
        items.sort()
        self._words = items

    # R
    def contains(self, word: str) -> bool:
        with self._lock:
            for w in self._words:
                if w == word:
                    return True
            return False

    def words(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(self._words)

    def snapshot(self) -> Tuple[Tuple[str, ...], int]:
        """Words and the version they belong to, read atomically."""
        with self._lock:
            return tuple(self._words), self._version

    def count(self) -> int:
        with self._lock:
            return len(self._words)

    @property
    def version(self) -> int:
        return self._version

    @property
    def capacity(self) -> int:
        return self._capacity

    # C
    def insert(self, word: str) -> bool:
        """
        Add a word, resort, persist. Returns False for a word already present.
        Raises CapacityExceeded (nothing mutated) or InvalidWord.
        If persisting fails the list is left as it was and StoreWriteError propagates.
        """
        check_word(word)
        with self._lock:
            if word in self._words:
                log.info("Duplicate insert ignored: %r", word)
                return False
            if len(self._words) >= self._capacity:
                raise CapacityExceeded(
                    f"Dictionary size limit reached ({self._capacity}); cannot add {word!r}"
                )
            updated = self._words + [word]
            updated.sort()
            try:
                self._persist(updated)
            except OSError as e:
                # in-memory list untouched: memory and file still agree
                raise StoreWriteError(f"could not rewrite dictionary: {e}") from e
            self._words = updated
            self._version += 1
            log.info("Added %r to dictionary (size=%d)", word, len(updated))
            return True

    def _persist(self, words: List[str]) -> None:
        pass

    def close(self) -> None:
        with self._lock:
            self._words = []
