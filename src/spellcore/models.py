# spellcore/models.py
"""
Data models for the correction engine.

- Candidate: one dictionary word with its distance to the queried word.
- Outcome / Resolution: how a single word of a sentence was resolved.
- CorrectionReport: the whole sentence, inputs and resolutions, by position.

These classes do not contain business logic; they only give names to the
values passed between ranking, resolution and the sentence coordinator.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from .config import SENTINEL_DISTANCE


@dataclass(frozen=True, slots=True)
class Candidate:
    """
    A ranked suggestion slot.

    Attributes
    ----------
    word : str
        Dictionary word, or "" for an unused slot.
    distance : int
        Edit distance to the queried word. Unused slots carry
        SENTINEL_DISTANCE so that any real candidate ranks ahead of them.
    """
    word: str
    distance: int

    @property
    def is_sentinel(self) -> bool:
        return self.word == "" and self.distance == SENTINEL_DISTANCE


SENTINEL = Candidate(word="", distance=SENTINEL_DISTANCE)

# always exactly TOP_K slots, ascending by distance
RankedSuggestions = Tuple[Candidate, ...]


class Outcome(str, Enum):
    ALREADY_PRESENT = "already_present"
    ADDED_AND_KEPT = "added_and_kept"
    SUGGESTION_CHOSEN = "suggestion_chosen"
    FALLBACK_DEFAULT = "fallback_default"


@dataclass(frozen=True, slots=True)
class Resolution:
    """
    The result of resolving one word of a sentence.

    Attributes
    ----------
    position : int
        0-based index of the word in the tokenized sentence.
    original : str
        The lowercased word as the client typed it.
    word : str
        The word placed in the corrected sentence.
    outcome : Outcome
        Which branch of the decision protocol produced ``word``.
    """
    position: int
    original: str
    word: str
    outcome: Outcome


@dataclass(slots=True)
class CorrectionReport:
    original: str                      # validated, lowercased input line
    words: List[str]                   # tokenized input, by position
    resolutions: List[Resolution] = field(default_factory=list)

    @property
    def corrected(self) -> str:
        ordered = sorted(self.resolutions, key=lambda r: r.position)
        return " ".join(r.word for r in ordered)
