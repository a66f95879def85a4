# spellcore/resolver.py
from __future__ import annotations
import logging
import string
import threading

from .channel import Channel
from .config import TOP_K
from .DB.api import WordStore
from .errors import CapacityExceeded, InvalidWord, StoreWriteError
from .models import Outcome, RankedSuggestions, Resolution
from .normalize import normalize_word
from .suggest import rank, format_suggestions

log = logging.getLogger(__name__)

DECISION_PROMPT = "Do you want to add this word to dictionary? (y/N) or type the number of a suggestion: "


def present_notice(word: str) -> str:
    return f"WORD '{word}' is already in the dictionary. Distance: 0\n"


def missing_notice(word: str) -> str:
    return f"WORD '{word}' is not present in dictionary.\n"


def _leading_number(reply: str) -> int:
    digits = ""
    for ch in reply:
        if ch not in string.digits:
            break
        digits += ch
    return int(digits)


def decide(reply: str, word: str, ranked: RankedSuggestions, position: int = 0) -> Resolution:
    """
    Map one reply line to a resolution. Never fails:
      * leading digits d in [1, K]  -> suggestion d (original word if that slot is empty)
      * leading digits out of range -> the original word
      * starts with y/Y             -> keep the word (caller inserts it)
      * anything else               -> the closest suggestion
    """
    r = reply.strip()
    head = r[:1]

    if head and head in string.digits:
        choice = _leading_number(r)
        if 1 <= choice <= len(ranked) and not ranked[choice - 1].is_sentinel:
            return Resolution(position, word, ranked[choice - 1].word, Outcome.SUGGESTION_CHOSEN)
        return Resolution(position, word, word, Outcome.FALLBACK_DEFAULT)

    if head in ("y", "Y"):
        return Resolution(position, word, word, Outcome.ADDED_AND_KEPT)

    if ranked and not ranked[0].is_sentinel:
        return Resolution(position, word, ranked[0].word, Outcome.SUGGESTION_CHOSEN)
    return Resolution(position, word, word, Outcome.FALLBACK_DEFAULT)


class WordResolver:
    """
    Resolves one word against the shared store, talking to the client through
    ``channel``.

    Ranking runs without any lock so that the words of a sentence rank in
    parallel. Everything that touches the channel (notice, suggestions,
    prompt, reply) and the optional insertion runs while holding
    ``exchange_lock``, which is shared by all resolvers of one sentence.
    The store serialises its own writers across sessions.
    """
    def __init__(self, store: WordStore, channel: Channel, exchange_lock: threading.Lock,
                 *, top_k: int = TOP_K) -> None:
        self.store = store
        self.channel = channel
        self.exchange_lock = exchange_lock
        self.top_k = top_k

    def resolve(self, position: int, word: str) -> Resolution:
        word = normalize_word(word)
        words, version = self.store.snapshot()
        ranked = rank(word, words, self.top_k)

        with self.exchange_lock:
            if self.store.version != version:
                # an insert landed while we were ranking
                words, version = self.store.snapshot()
                ranked = rank(word, words, self.top_k)

            if self.store.contains(word):
                self.channel.send(present_notice(word))
                self.channel.send(format_suggestions(ranked))
                return Resolution(position, word, word, Outcome.ALREADY_PRESENT)

            self.channel.send(missing_notice(word))
            self.channel.send(format_suggestions(ranked))
            reply = self.channel.prompt(word, DECISION_PROMPT)

            result = decide(reply, word, ranked, position)
            if result.outcome is Outcome.ADDED_AND_KEPT:
                self._insert(word)
            return result

    def _insert(self, word: str) -> None:
        try:
            self.store.insert(word)
        except CapacityExceeded as e:
            log.warning("%s", e)
        except InvalidWord as e:
            log.warning("Not adding %r: %s", word, e)
        except StoreWriteError as e:
            log.error("Not adding %r: %s", word, e)
