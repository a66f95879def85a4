from spellcore.config import SENTINEL_DISTANCE
from spellcore.distance import distance
from spellcore.models import SENTINEL
from spellcore.suggest import rank, format_suggestions, suggestion_rows


def test_always_five_slots_sorted():
    words = ["box", "cat", "dog", "fox", "zebra", "hat", "hot", "house"]
    ranked = rank("hut", words)
    assert len(ranked) == 5
    dists = [c.distance for c in ranked]
    assert dists == sorted(dists)
    assert ranked[0].distance <= min(distance("hut", w) for w in words)


def test_equal_distances_keep_dictionary_order():
    # every word is one substitution away; only the first five survive
    words = ["bat", "cat", "hat", "mat", "rat", "sat"]
    ranked = rank("zat", words)
    assert [c.word for c in ranked] == ["bat", "cat", "hat", "mat", "rat"]
    assert all(c.distance == 1 for c in ranked)


def test_later_closer_word_moves_ahead():
    ranked = rank("cat", ["dog", "cot", "cat"])
    assert [(c.word, c.distance) for c in ranked[:3]] == [("cat", 0), ("cot", 1), ("dog", 3)]


def test_small_dictionary_pads_with_sentinels():
    ranked = rank("cat", ["cot", "dog"])
    assert len(ranked) == 5
    assert ranked[2:] == (SENTINEL, SENTINEL, SENTINEL)
    assert ranked[4].distance == SENTINEL_DISTANCE
    assert rank("cat", []) == (SENTINEL,) * 5


def test_suggestion_block_format():
    text = format_suggestions(rank("cat", ["cot"]))
    lines = text.splitlines()
    assert lines[0] == "Closest suggestions:"
    assert lines[1] == "1. cot (Distance: 1)"
    assert lines[2] == "2.  (Distance: inf)"
    assert len(lines) == 6


def test_rows_hide_sentinel_distance():
    rows = suggestion_rows(rank("cat", ["cat"]))
    assert rows[0] == {"rank": 1, "word": "cat", "distance": 0}
    assert rows[1] == {"rank": 2, "word": "", "distance": None}
