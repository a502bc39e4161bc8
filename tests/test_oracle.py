# tests/test_oracle.py
# The trie must give exactly the naive scan's answer, for any vocabulary.

import random
import string

import pytest

from radix_autocompleter.core.naive import NaiveAutoCompleter
from radix_autocompleter.core.suggestion import Suggestion
from radix_autocompleter.core.trie import Trie

# small alphabet so words share lots of prefixes and edges keep splitting
ALPHABET = "abc"


def random_vocab(rng, size):
    return [
        ("".join(rng.choice(ALPHABET) for _ in range(rng.randint(0, 7))), rng.randint(0, 6))
        for _ in range(size)
    ]


def assert_compressed(trie):
    for _, node in trie.walk():
        for key, edge in node.edges.items():
            assert edge.label
            assert key == edge.label[0]


def all_prefixes(vocab):
    out = {""}
    for word, _ in vocab:
        for i in range(len(word) + 1):
            out.add(word[:i])
            out.add(word[:i] + "d")  # forks off the vocabulary
    return sorted(out)


def test_matches_on_mixed_fixture():
    data = [
        ("car", 1), ("carpet", 2), ("carpenter", 3), ("cocoon", 5), ("cain", 2),
        ("aba", 3), ("acas", 4), ("ballcdcder", 5), ("caa", 5), ("cascasin", 3),
        ("cacs", 3), ("bascascll", 4), ("basller", 5), ("cdacs", 3), ("dascascll", 4),
        ("dasller", 5), ("eeacs", 3), ("escascll", 4), ("eesller", 5),
    ]
    trie, naive = Trie(data), NaiveAutoCompleter(data)
    for prefix in ["c", "a", "d", "e", "ca", "da", "es", "ba", "ac", "cd"]:
        assert trie.suggestions(prefix) == naive.suggestions(prefix), prefix


@pytest.mark.parametrize("seed", range(25))
@pytest.mark.parametrize("top_k", [1, 3, 5])
def test_matches_on_random_vocabularies(seed, top_k):
    rng = random.Random(seed)
    vocab = random_vocab(rng, rng.randint(1, 60))
    trie, naive = Trie(vocab, top_k=top_k), NaiveAutoCompleter(vocab, top_k=top_k)
    assert_compressed(trie)
    for prefix in all_prefixes(vocab):
        got = trie.suggestions(prefix)
        assert got == naive.suggestions(prefix), prefix
        assert len(got) <= top_k
        # strictly best first
        assert all(a > b for a, b in zip(got, got[1:]))


def test_matches_on_wider_alphabet():
    rng = random.Random(99)
    vocab = [
        ("".join(rng.choice(string.ascii_lowercase[:8]) for _ in range(rng.randint(1, 10))), rng.randint(0, 100))
        for _ in range(2000)
    ]
    trie, naive = Trie(vocab), NaiveAutoCompleter(vocab)
    for word, _ in vocab[:300]:
        for i in range(len(word) + 1):
            assert trie.suggestions(word[:i]) == naive.suggestions(word[:i])


@pytest.mark.parametrize("seed", range(10))
def test_one_more_insert_only_adds_or_displaces_the_last(seed):
    rng = random.Random(1000 + seed)
    vocab = random_vocab(rng, 30)
    trie = Trie(vocab)
    prefixes = all_prefixes(vocab)
    before = {p: trie.suggestions(p) for p in prefixes}

    word = "".join(rng.choice(ALPHABET) for _ in range(rng.randint(0, 7)))
    score = rng.randint(0, 6)
    trie.insert(word, score)
    assert_compressed(trie)
    new = Suggestion.of(word, score)

    for p in prefixes:
        after = trie.suggestions(p)
        if not word.startswith(p):
            assert after == before[p]
            continue
        expected = sorted(set(before[p]) | {new}, reverse=True)[: trie.top_k]
        assert after == expected
