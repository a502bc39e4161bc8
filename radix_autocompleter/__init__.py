"""
radix_autocompleter

Prefix autocomplete over a static, weighted vocabulary.
 - Trie: compressed trie caching the top suggestions at every node
 - NaiveAutoCompleter: linear scan over the sorted vocabulary, used as the oracle
"""

from .core import (
    DEFAULT_TOP_K,
    AutoCompleterProtocol,
    NaiveAutoCompleter,
    Suggestion,
    Trie,
    build_autocompleter,
)

__all__ = [
    "DEFAULT_TOP_K",
    "AutoCompleterProtocol",
    "NaiveAutoCompleter",
    "Suggestion",
    "Trie",
    "build_autocompleter",
]

__version__ = "0.1.0"
