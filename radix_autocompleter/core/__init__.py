"""
radix_autocompleter.core

The suggestion indexes and the pieces they share:
 - Suggestion and its ranking order
 - TopKCache, the bounded per-node cache
 - Trie (compressed trie) and NaiveAutoCompleter (oracle)
 - build_autocompleter factory
"""

from .suggestion import DEFAULT_TOP_K, Suggestion, compare
from .top_k import TopKCache
from .trie import Edge, Trie, TrieNode
from .naive import NaiveAutoCompleter
from .protocols import AutoCompleterProtocol, SuggestionRecord
from .autocompleter import KINDS, build_autocompleter

__all__ = [
    "DEFAULT_TOP_K",
    "Suggestion",
    "compare",
    "TopKCache",
    "Edge",
    "Trie",
    "TrieNode",
    "NaiveAutoCompleter",
    "AutoCompleterProtocol",
    "SuggestionRecord",
    "KINDS",
    "build_autocompleter",
]
