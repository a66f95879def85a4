import threading
from pathlib import Path
import pytest

from spellcore.channel import ScriptedChannel
from spellcore.engine import Engine


def _seed(tmp: Path) -> str:
    p = tmp / "words.txt"
    p.write_text("box\ncat\ndog\nzebra\n", encoding="utf-8")
    return str(p)


def _run_sessions(eng: Engine, new_words: list[str]) -> list:
    barrier = threading.Barrier(len(new_words))
    reports = [None] * len(new_words)

    def session(i: int, w: str):
        barrier.wait()
        reports[i] = eng.correct(w, ScriptedChannel({w: "y"}))

    threads = [threading.Thread(target=session, args=(i, w)) for i, w in enumerate(new_words)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)
    return reports


@pytest.mark.e2e
def test_two_sessions_insert_distinct_words(tmp_path: Path):
    path = _seed(tmp_path)
    eng = Engine()
    try:
        eng.load(dictionary=path)
        before = eng.store.count()
        reports = _run_sessions(eng, ["qwx", "zx"])
        assert [r.corrected for r in reports] == ["qwx", "zx"]

        words = eng.store.words()
        assert eng.store.count() == before + 2
        assert list(words) == sorted(set(words))
        assert Path(path).read_text(encoding="utf-8").splitlines() == list(words)
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_many_sessions_keep_store_consistent(tmp_path: Path):
    path = _seed(tmp_path)
    new_words = ["zq" + c for c in "abcdefghij"]
    eng = Engine()
    try:
        eng.load(db_dsn=f"file://{path}")
        _run_sessions(eng, new_words)
        words = eng.store.words()
        assert len(words) == 4 + len(new_words)
        assert all(w in words for w in new_words)
        assert list(words) == sorted(words)
        assert Path(path).read_text(encoding="utf-8").splitlines() == list(words)
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_engine_requires_load():
    eng = Engine()
    with pytest.raises(RuntimeError):
        eng.suggest("cat")
    with pytest.raises(RuntimeError):
        eng.correct("cat", ScriptedChannel())


@pytest.mark.e2e
def test_memory_engine_suggest_and_contains():
    eng = Engine()
    try:
        eng.load(db_dsn="memory://")
        assert eng.store.count() == 0
        assert eng.store.insert("cat")
        assert eng.contains("CAT")
        assert eng.suggest("cot")[0].word == "cat"
    finally:
        eng.shutdown()
