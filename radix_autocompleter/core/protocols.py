# radix_autocompleter/core/protocols.py
"""
Protocol interfaces shared by the indexes and their callers.

The CLI, the benchmark harness and the tests only depend on
AutoCompleterProtocol, so Trie and NaiveAutoCompleter can be swapped freely.
"""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable
from typing_extensions import TypedDict

from .suggestion import Suggestion


# Typed structures -----------------------------------------------------------

class SuggestionRecord(TypedDict):
    """
    A suggestion flattened for display or JSON output.

    Example:
      {"rank": 1, "word": "carpenter", "score": 3}
    """
    rank: int
    word: str
    score: int


def to_records(suggestions: List[Suggestion]) -> List[SuggestionRecord]:
    return [
        SuggestionRecord(rank=i, word=s.word, score=s.score)
        for i, s in enumerate(suggestions, 1)
    ]


# Protocols ------------------------------------------------------------------

@runtime_checkable
class AutoCompleterProtocol(Protocol):
    """Anything that can answer a prefix query."""

    def suggestions(self, prefix: str) -> List[Suggestion]:
        """
        Return at most top_k suggestions starting with `prefix`,
        sorted by score desc then word desc.
        """
        ...
