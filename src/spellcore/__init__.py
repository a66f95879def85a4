"""
Text Analysis Server engine

Resolves the words of a short sentence against a shared word list: exact
matches pass through, unknown words get the five nearest dictionary words by
edit distance and the client decides between a suggestion, its own word (which
is then added to the dictionary) or the closest match.

The package is split the same way the work is:
- distance / suggest: edit distance and bounded top-K ranking
- DB: the word store (file-backed or in-memory), one lock per store
- resolver: the per-word decision exchange
- coordinator: one thread per word, reassembly by position
- engine: wiring for servers and tests

Example Usage:
    from spellcore import Engine, ScriptedChannel

    eng = Engine()
    eng.load(dictionary="data/basic_words.txt")
    report = eng.correct("helo world", ScriptedChannel({"helo": "1"}))
    print(report.corrected)
"""

# src/spellcore/__init__.py
from .engine import Engine  # re-export
from .channel import Channel, ScriptedChannel
from .distance import distance
from .suggest import rank

__version__ = "1.0.0"
__all__ = ["Engine", "Channel", "ScriptedChannel", "distance", "rank"]
