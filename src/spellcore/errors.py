# spellcore/errors.py
"""
Exceptions raised by the correction engine.

Each one subclasses the builtin the surrounding code would otherwise raise, so
callers that only care about ``ValueError`` / ``RuntimeError`` / ``OSError``
keep working.
"""
from __future__ import annotations


class FatalStartup(RuntimeError):
    """The server cannot start: dictionary unreadable/over capacity or socket setup failed."""


class ValidationError(ValueError):
    """A submitted sentence is too long or contains disallowed characters."""


class CapacityExceeded(RuntimeError):
    """The dictionary already holds DICTIONARY_CAPACITY words."""


class InvalidWord(ValueError):
    """A word cannot be stored (empty, not lowercase, or too long)."""


class StoreWriteError(OSError):
    """The backing dictionary file could not be rewritten."""
