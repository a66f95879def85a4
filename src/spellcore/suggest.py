from __future__ import annotations
from typing import Iterable, List

from .config import TOP_K
from .distance import distance
from .models import Candidate, RankedSuggestions, SENTINEL

# Rank dictionary words by edit distance, keeping only the best K.


def rank(word: str, words: Iterable[str], k: int = TOP_K) -> RankedSuggestions:
    """
    /* ~~~ Bounded top-K selection, O(n*K), no sort of the dictionary. ~~~ */
    Each word is placed in the first slot whose distance is strictly larger,
    shifting the tail right and dropping the last slot. Strict "<" means that
    among equal distances the word met first (dictionary order) ranks higher.
    Slots never filled stay SENTINEL.
    """
    if k <= 0:
        return ()
    slots: List[Candidate] = [SENTINEL] * k
    for entry in words:
        d = distance(word, entry)
        for j in range(k):
            if d < slots[j].distance:
                slots[j + 1:] = slots[j:k - 1]
                slots[j] = Candidate(entry, d)
                break
    return tuple(slots)


def _fmt_distance(c: Candidate) -> str:
    return "inf" if c.is_sentinel else str(c.distance)


def format_suggestions(ranked: RankedSuggestions) -> str:
    """The 'Closest suggestions:' block sent to clients, one line per slot."""
    lines = ["Closest suggestions:"]
    for i, c in enumerate(ranked, start=1):
        lines.append(f"{i}. {c.word} (Distance: {_fmt_distance(c)})")
    return "\n".join(lines) + "\n"


def suggestion_rows(ranked: RankedSuggestions) -> list[dict]:
    """JSON-friendly rows; sentinel distances become None."""
    return [
        {"rank": i, "word": c.word, "distance": None if c.is_sentinel else c.distance}
        for i, c in enumerate(ranked, start=1)
    ]
