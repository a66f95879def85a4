from __future__ import annotations
import string
from typing import List, Tuple

from .config import MAX_SENTENCE_LENGTH, MAX_WORD_LENGTH
from .errors import ValidationError

_LETTERS = frozenset(string.ascii_letters)

TOO_LONG_MESSAGE = f"ERROR: Input exceeds the {MAX_SENTENCE_LENGTH}-character limit!"
INVALID_CHARS_MESSAGE = "ERROR: Input contains invalid characters! Only alphabet and spaces are allowed."


def _is_allowed_char(ch: str) -> bool:
    """ASCII letters and whitespace are kept. Anything else rejects the sentence."""
    return ch in _LETTERS or ch.isspace()


def normalize_word(word: str) -> str:
    """Trim and lowercase a single word."""
    return word.strip().lower()


def validate_sentence(text: str) -> str:
    """
    Check one client line and return it trimmed.
    Rules:
      * surrounding whitespace (including the line terminator) is dropped first
      * more than MAX_SENTENCE_LENGTH characters -> ValidationError
      * any character that is neither an ASCII letter nor whitespace -> ValidationError
    Case is preserved; callers lowercase via normalize_sentence().
    """
    trimmed = text.strip()
    if len(trimmed) > MAX_SENTENCE_LENGTH:
        raise ValidationError(TOO_LONG_MESSAGE)
    if not all(_is_allowed_char(ch) for ch in trimmed):
        raise ValidationError(INVALID_CHARS_MESSAGE)
    return trimmed


def validate_word(word: str) -> str:
    """A single lookup word: at most MAX_WORD_LENGTH ASCII letters, else ValidationError."""
    trimmed = word.strip()
    if len(trimmed) > MAX_WORD_LENGTH:
        raise ValidationError(f"ERROR: Word exceeds the {MAX_WORD_LENGTH}-character limit!")
    if not all(ch in _LETTERS for ch in trimmed):
        raise ValidationError("ERROR: Word contains invalid characters! Only alphabet letters are allowed.")
    return trimmed


def normalize_sentence(text: str) -> str:
    """Validate, then lowercase."""
    return validate_sentence(text).lower()


def tokenize(text: str) -> List[Tuple[int, str]]:
    """Split on whitespace runs; return (position, word) pairs, empty words dropped."""
    return list(enumerate(text.split()))
