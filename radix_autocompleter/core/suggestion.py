# suggestion.py
# A word paired with its popularity score, plus the single ranking order
# shared by every index in the package.

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

Word = str
Score = int
Candidate = Tuple[Word, Score]

# how many suggestions an index returns (and each trie node caches)
DEFAULT_TOP_K = 5


@dataclass(frozen=True, order=True)
class Suggestion:
    """
    Immutable (score, word) pair.

    Field order matters: the generated comparisons rank by score first and
    break ties on the word, both ascending. Equality covers both fields, so
    two suggestions are equal only when word AND score match.
    Instances are shared by reference between trie nodes, never copied.
    """

    score: Score
    word: Word

    def __post_init__(self) -> None:
        if isinstance(self.score, bool) or not isinstance(self.score, int) or self.score < 0:
            raise ValueError(f"score must be a non-negative integer, got {self.score!r}")

    @classmethod
    def of(cls, word: Word, score: Score) -> "Suggestion":
        return cls(score=score, word=word)

    def as_tuple(self) -> Candidate:
        return (self.word, self.score)


def compare(a: Suggestion, b: Suggestion) -> int:
    """Three-way compare: -1 if a ranks lower than b, 1 if higher, 0 if equal."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def check_top_k(top_k: int) -> int:
    """Validate a cap value passed to an index or cache."""
    if isinstance(top_k, bool) or not isinstance(top_k, int) or top_k < 1:
        raise ValueError(f"top_k must be a positive integer, got {top_k!r}")
    return top_k
