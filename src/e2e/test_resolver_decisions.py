import logging
import threading
from pathlib import Path
import pytest

from spellcore.channel import ScriptedChannel
from spellcore.DB import FileStore, MemoryStore
from spellcore.models import Outcome
from spellcore.resolver import (
    DECISION_PROMPT, WordResolver, decide, missing_notice, present_notice,
)
from spellcore.suggest import format_suggestions, rank

WORDS = ["box", "cat", "dog", "fox", "zebra"]


def _resolve(store, word: str, reply: str | None = None):
    ch = ScriptedChannel({word: reply} if reply is not None else {})
    res = WordResolver(store, ch, threading.Lock()).resolve(0, word)
    return res, ch


def test_present_word_resolves_to_itself_without_prompt():
    store = MemoryStore(WORDS)
    res, ch = _resolve(store, "Zebra")
    assert res.outcome is Outcome.ALREADY_PRESENT
    assert res.word == "zebra"
    assert ch.prompted == []
    assert ch.transcript == [present_notice("zebra"), format_suggestions(rank("zebra", WORDS))]
    assert store.words() == tuple(WORDS) and store.version == 0


def test_unknown_word_messages_precede_prompt():
    store = MemoryStore(WORDS)
    _, ch = _resolve(store, "qwx", "")
    assert ch.transcript == [missing_notice("qwx"), format_suggestions(rank("qwx", WORDS)), DECISION_PROMPT]
    assert ch.prompted == ["qwx"]


def test_yes_adds_word_and_persists(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    store = FileStore(str(p))
    res, _ = _resolve(store, "zx", "y")
    assert res.outcome is Outcome.ADDED_AND_KEPT and res.word == "zx"
    assert store.contains("zx")
    assert p.read_text(encoding="utf-8").splitlines() == list(store.words())


@pytest.mark.parametrize("k", [1, 2, 3, 4, 5])
def test_digit_picks_that_suggestion(k):
    store = MemoryStore(WORDS)
    ranked = rank("qwx", WORDS)
    res, _ = _resolve(store, "qwx", str(k))
    assert res.outcome is Outcome.SUGGESTION_CHOSEN
    assert res.word == ranked[k - 1].word


@pytest.mark.parametrize("reply", ["0", "6", "42"])
def test_out_of_range_digit_keeps_original(reply):
    store = MemoryStore(WORDS)
    res, _ = _resolve(store, "qwx", reply)
    assert res.outcome is Outcome.FALLBACK_DEFAULT
    assert res.word == "qwx"
    assert not store.contains("qwx")


@pytest.mark.parametrize("reply", ["", "n", "no", "???", "  "])
def test_anything_else_takes_closest(reply):
    store = MemoryStore(WORDS)
    res, _ = _resolve(store, "qwx", reply)
    assert res.outcome is Outcome.SUGGESTION_CHOSEN
    assert res.word == "box"          # box and fox tie at 2; box comes first
    assert store.count() == len(WORDS)


def test_full_dictionary_still_keeps_word(caplog):
    caplog.set_level(logging.WARNING)
    store = MemoryStore(["box"], capacity=1)
    res, _ = _resolve(store, "zx", "Yes")
    assert res.outcome is Outcome.ADDED_AND_KEPT and res.word == "zx"
    assert store.words() == ("box",)
    assert "limit" in caplog.text


def test_empty_dictionary_never_picks_blank_slot():
    store = MemoryStore()
    assert _resolve(store, "cat", "")[0].word == "cat"
    assert _resolve(store, "cat", "1")[0].word == "cat"


def test_decide_reads_leading_digits_only():
    ranked = rank("qwx", WORDS)
    assert decide("3abc", "qwx", ranked).word == ranked[2].word
    assert decide(" 2 \n", "qwx", ranked).word == ranked[1].word
    assert decide("Y", "qwx", ranked).outcome is Outcome.ADDED_AND_KEPT
    assert decide("7y", "qwx", ranked).outcome is Outcome.FALLBACK_DEFAULT
