# spellcore/channel.py
from __future__ import annotations
from typing import Dict, List, Optional, Protocol


class Channel(Protocol):
    """
    The per-connection message pipe a resolver talks through.

    send(text)          -> deliver a message, no reply expected
    prompt(word, text)  -> deliver a prompt for ``word`` and block for one reply line
    """
    def send(self, text: str) -> None: ...
    def prompt(self, word: str, text: str) -> str: ...


class ScriptedChannel(Channel):
    """
    Channel with replies fixed up front, keyed by the word being prompted.

    Used by the web API and tests. Everything sent is kept in ``transcript``;
    ``prompted`` lists the words asked about, in the order they were asked.
    Words without a scripted reply get ``default``.
    """
    def __init__(self, replies: Optional[Dict[str, str]] = None, default: str = "") -> None:
        self.replies = {k.lower(): str(v) for k, v in (replies or {}).items()}
        self.default = default
        self.transcript: List[str] = []
        self.prompted: List[str] = []

    def send(self, text: str) -> None:
        self.transcript.append(text)

    def prompt(self, word: str, text: str) -> str:
        self.transcript.append(text)
        self.prompted.append(word)
        return self.replies.get(word, self.default)
