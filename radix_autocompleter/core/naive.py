# naive.py
# Linear-scan autocompleter. Too slow for real use on big vocabularies; it
# is kept as the reference answer the Trie is checked against, and as the
# baseline in benchmarks.

from __future__ import annotations
import logging
from itertools import islice
from typing import Iterable, List

from .suggestion import DEFAULT_TOP_K, Candidate, Suggestion, check_top_k

logger = logging.getLogger(__name__)


class NaiveAutoCompleter:
    """All suggestions in one list, best first. Queries filter the whole list."""

    def __init__(self, vocabulary: Iterable[Candidate], top_k: int = DEFAULT_TOP_K) -> None:
        self.top_k = check_top_k(top_k)
        unique = {Suggestion.of(word, score) for word, score in vocabulary}
        self._suggestions: List[Suggestion] = sorted(unique, reverse=True)
        logger.debug("naive index holds %d suggestions", len(self._suggestions))

    def suggestions(self, prefix: str) -> List[Suggestion]:
        matching = (s for s in self._suggestions if s.word.startswith(prefix))
        return list(islice(matching, self.top_k))

    def __len__(self) -> int:
        return len(self._suggestions)

    def __repr__(self) -> str:
        return f"NaiveAutoCompleter(suggestions={len(self._suggestions)}, top_k={self.top_k})"
