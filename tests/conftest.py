import pytest

from radix_autocompleter.core.naive import NaiveAutoCompleter
from radix_autocompleter.core.trie import Trie

VOCAB = [
    ("car", 1),
    ("carpet", 2),
    ("carpenter", 3),
    ("cocoon", 5),
    ("cain", 3),
    ("cameo", 3),
    ("ball", 4),
    ("baller", 5),
]


@pytest.fixture
def vocab():
    return list(VOCAB)


@pytest.fixture
def trie(vocab):
    return Trie(vocab)


@pytest.fixture
def naive(vocab):
    return NaiveAutoCompleter(vocab)
