# top_k.py
# Bounded ordered set holding the best suggestions seen so far.

from __future__ import annotations
from bisect import bisect_left, insort
from typing import Iterable, Iterator, List, Optional

from .suggestion import DEFAULT_TOP_K, Suggestion, check_top_k


class TopKCache:
    """
    Keeps at most `top_k` distinct suggestions, stored in ascending rank
    order so the weakest entry is always at index 0.

    add() keeps the invariant that the cache holds exactly the best
    `top_k` of everything ever added. A copy of a correct cache followed
    by more add() calls stays correct, since one new element can only
    ever push out the single weakest member.
    """

    __slots__ = ("_items", "top_k")

    def __init__(self, top_k: int = DEFAULT_TOP_K, items: Optional[Iterable[Suggestion]] = None) -> None:
        self.top_k = check_top_k(top_k)
        self._items: List[Suggestion] = []
        for s in items or ():
            self.add(s)

    def add(self, suggestion: Suggestion) -> None:
        if suggestion in self:
            return
        if len(self._items) < self.top_k:
            insort(self._items, suggestion)
        elif suggestion > self._items[0]:
            # evict the current minimum
            del self._items[0]
            insort(self._items, suggestion)

    def minimum(self) -> Optional[Suggestion]:
        return self._items[0] if self._items else None

    def sorted(self) -> List[Suggestion]:
        """Best first: score descending, then word descending on ties."""
        return self._items[::-1]

    def copy(self) -> "TopKCache":
        clone = TopKCache(self.top_k)
        clone._items = list(self._items)
        return clone

    def __contains__(self, suggestion: Suggestion) -> bool:
        i = bisect_left(self._items, suggestion)
        return i < len(self._items) and self._items[i] == suggestion

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Suggestion]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TopKCache):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        words = ", ".join(f"{s.word}:{s.score}" for s in self.sorted())
        return f"TopKCache([{words}])"
