# spellcore/engine.py
from __future__ import annotations

import os
import logging
from typing import Optional

from . import config as CFG
from .channel import Channel
from .coordinator import SentenceCoordinator
from .DB.api import WordStore, make_store
from .errors import FatalStartup
from .models import CorrectionReport, RankedSuggestions
from .normalize import normalize_word
from .suggest import rank

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - the word store (file-backed or in-memory) via make_store,
      - ranking (suggest.rank),
      - sentence correction (coordinator.SentenceCoordinator).

    Public API (used by the TCP server, Flask and tests):
      * load(dictionary=..., db_dsn=...): open the one store for this process
      * suggest(word, top_k):             non-interactive ranking
      * contains(word):                   membership
      * correct(sentence, channel):       interactive correction of one line
      * shutdown():                       close the store

    The engine owns exactly one store; every session gets that same instance,
    so the store's lock is global to the process.
    """

    # ------------- lifecycle -------------

    def __init__(self, *, top_k: int = CFG.TOP_K) -> None:
        self.top_k = top_k
        self._store: Optional[WordStore] = None
        self._coordinator: Optional[SentenceCoordinator] = None

    # /* ~~~ Open the dictionary and wire up the coordinator ~~~ */
    def load(
        self,
        *,
        dictionary: Optional[str] = None,     # path to a word-per-line file
        db_dsn: Optional[str] = None,         # "file:///path" or "memory://"; wins over dictionary
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["TEXTANALYSIS_VERBOSE"] = "1"

        dsn = db_dsn or dictionary or CFG.DICTIONARY_FILE
        log.info("Initializing word store: %s", dsn)
        try:
            store = make_store(dsn)
        except FatalStartup:
            log.error("Cannot open dictionary %s", dsn)
            raise
        self.attach(store)
        log.info("Engine load() complete: words=%d", store.count())

    def attach(self, store: WordStore) -> None:
        """Use an already-built store (tests, embedding)."""
        self._store = store
        self._coordinator = SentenceCoordinator(store, top_k=self.top_k)

    @property
    def store(self) -> WordStore:
        if self._store is None:
            raise RuntimeError("Engine not initialized. Call load() first.")
        return self._store

    # ------------- query -------------

    def suggest(self, word: str, *, top_k: Optional[int] = None) -> RankedSuggestions:
        return rank(normalize_word(word), self.store.words(), top_k or self.top_k)

    def contains(self, word: str) -> bool:
        return self.store.contains(normalize_word(word))

    # /* ~~~ Run one interactive correction over a client channel ~~~ */
    def correct(self, sentence: str, channel: Channel) -> CorrectionReport:
        if self._coordinator is None:
            raise RuntimeError("Engine not initialized. Call load() first.")
        return self._coordinator.process(sentence, channel)

    # ------------- teardown -------------

    def shutdown(self) -> None:
        try:
            if self._store:
                self._store.close()
        finally:
            self._store = None
            self._coordinator = None
            log.info("Engine shutdown complete")
