# autocompleter.py
"""
Factory picking an index implementation by name.

    ac = build_autocompleter("trie", [("car", 1), ("carpet", 2)])
    ac.suggestions("car")
"""

from __future__ import annotations
import logging
import time
from typing import Iterable, Tuple

from .naive import NaiveAutoCompleter
from .protocols import AutoCompleterProtocol
from .suggestion import DEFAULT_TOP_K, Candidate
from .trie import Trie

logger = logging.getLogger(__name__)

KINDS: Tuple[str, ...] = ("trie", "naive")


def build_autocompleter(
    kind: str, vocabulary: Iterable[Candidate], top_k: int = DEFAULT_TOP_K
) -> AutoCompleterProtocol:
    """Build a `kind` index ("trie" or "naive") over the whole vocabulary."""
    if kind not in KINDS:
        raise ValueError(f"unknown autocompleter {kind!r}; supported: {', '.join(KINDS)}")

    t0 = time.perf_counter()
    if kind == "trie":
        ac: AutoCompleterProtocol = Trie(vocabulary, top_k=top_k)
    else:
        ac = NaiveAutoCompleter(vocabulary, top_k=top_k)
    logger.info("built %s autocompleter in %.1f ms", kind, (time.perf_counter() - t0) * 1000.0)
    return ac
