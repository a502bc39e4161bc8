# tests/test_top_k.py
# unit tests for the bounded per-node cache

import random

from radix_autocompleter.core.suggestion import Suggestion
from radix_autocompleter.core.top_k import TopKCache


def S(word, score):
    return Suggestion.of(word, score)


def test_fills_up_to_cap():
    c = TopKCache(3)
    for i in range(3):
        c.add(S(f"w{i}", i))
    assert len(c) == 3
    assert c.minimum() == S("w0", 0)


def test_evicts_minimum_only_when_beaten():
    c = TopKCache(2, [S("a", 1), S("b", 2)])
    c.add(S("c", 1))  # ties on score, but "c" > "a" so it wins
    assert [s.word for s in c.sorted()] == ["b", "c"]
    c.add(S("aa", 0))  # weaker than everything, dropped
    assert [s.word for s in c.sorted()] == ["b", "c"]


def test_sorted_is_best_first():
    c = TopKCache(5, [S("cain", 3), S("cameo", 3), S("cocoon", 5), S("car", 1)])
    assert [s.word for s in c.sorted()] == ["cocoon", "cameo", "cain", "car"]


def test_duplicate_add_is_noop():
    c = TopKCache(2, [S("a", 1), S("b", 2)])
    c.add(S("b", 2))
    assert len(c) == 2
    assert S("a", 1) in c


def test_copy_is_independent():
    c = TopKCache(2, [S("a", 1)])
    d = c.copy()
    d.add(S("b", 2))
    assert len(c) == 1
    assert len(d) == 2
    assert d.top_k == 2


def test_matches_sorting_everything():
    rng = random.Random(3)
    for _ in range(50):
        items = {S(rng.choice("abcdefgh") * rng.randint(1, 3), rng.randint(0, 4)) for _ in range(20)}
        c = TopKCache(5)
        for s in items:
            c.add(s)
        assert c.sorted() == sorted(items, reverse=True)[:5]


def test_seeded_copy_stays_correct():
    # a copied top-k plus one more add equals the top-k of the union
    rng = random.Random(11)
    for _ in range(50):
        base = {S(f"w{rng.randint(0, 30)}", rng.randint(0, 5)) for _ in range(12)}
        extra = S(f"x{rng.randint(0, 30)}", rng.randint(0, 5))
        seeded = TopKCache(5, base).copy()
        seeded.add(extra)
        assert seeded.sorted() == sorted(base | {extra}, reverse=True)[:5]
