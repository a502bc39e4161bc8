# trie.py
# Compressed trie (radix tree) for prefix-based autocompletion.
# Edges carry whole string fragments instead of single characters, and every
# node caches the best suggestions found anywhere below it, so a query only
# walks the prefix and reads one cache.

from __future__ import annotations
import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .suggestion import DEFAULT_TOP_K, Candidate, Score, Suggestion, Word, check_top_k
from .top_k import TopKCache

logger = logging.getLogger(__name__)


def _common_prefix_len(label: str, text: str, start: int) -> int:
    """Length of the shared prefix of `label` and `text[start:]`."""
    n = 0
    limit = min(len(label), len(text) - start)
    while n < limit and label[n] == text[start + n]:
        n += 1
    return n


class TrieNode:
    """
    A single node in the Trie.
    edges: first char of the label -> Edge (one edge per first char)
    suggestion: set when an inserted word ends exactly here
    top: best suggestions in this subtree, this node's own included
    """

    __slots__ = ("edges", "suggestion", "top")

    def __init__(self, top_k: int = DEFAULT_TOP_K) -> None:
        self.edges: Dict[str, Edge] = {}
        self.suggestion: Optional[Suggestion] = None
        self.top = TopKCache(top_k)

    @property
    def is_word(self) -> bool:
        return self.suggestion is not None

    def __repr__(self) -> str:
        return f"TrieNode(edges={sorted(self.edges)}, suggestion={self.suggestion}, top={self.top})"


class Edge:
    """Labelled link to a child node. The label is never empty."""

    __slots__ = ("label", "child")

    def __init__(self, label: str, child: TrieNode) -> None:
        self.label = label
        self.child = child

    def __repr__(self) -> str:
        return f"Edge({self.label!r})"


class Trie:
    """
    Compressed trie used as the main suggestion index.
     - build once from (word, score) pairs, then query read-only
     - suggestions(prefix) costs O(len(prefix)), independent of vocab size
     - answers always match NaiveAutoCompleter for the same vocabulary
    """

    def __init__(self, vocabulary: Optional[Iterable[Candidate]] = None, top_k: int = DEFAULT_TOP_K) -> None:
        self.top_k = check_top_k(top_k)
        self._root = TrieNode(self.top_k)
        self._size = 0
        if vocabulary is not None:
            self.insert_many(vocabulary)

    @property
    def root(self) -> TrieNode:
        return self._root

    # insertion -----------------------------------------------------
    def insert(self, word: Word, score: Score) -> None:
        """
        Insert one (word, score) pair.
        Every node on the path gets the suggestion offered to its cache. When
        the word leaves an edge part way through its label, the edge is split
        and the new middle node starts from a copy of the old child's cache.
        """
        suggestion = Suggestion.of(word, score)
        node = self._root
        pos = 0
        while True:
            node.top.add(suggestion)
            if pos == len(word):
                if node.suggestion is None:
                    self._size += 1
                node.suggestion = suggestion
                return

            ch = word[pos]
            edge = node.edges.get(ch)
            if edge is None:
                # no word continues this way yet: hang the whole rest off one edge
                child = TrieNode(self.top_k)
                node.edges[ch] = Edge(word[pos:], child)
                node = child
                pos = len(word)
                continue

            n = _common_prefix_len(edge.label, word, pos)
            if n < len(edge.label):
                # split "carpet" into "car" -> "pet" when "cart" arrives
                mid = TrieNode(self.top_k)
                mid.top = edge.child.top.copy()
                tail = edge.label[n:]
                mid.edges[tail[0]] = Edge(tail, edge.child)
                node.edges[ch] = Edge(edge.label[:n], mid)
                node = mid
            else:
                node = edge.child
            pos += n

    def insert_many(self, vocabulary: Iterable[Candidate]) -> None:
        """Bulk insert; order does not matter and duplicates are fine."""
        count = 0
        for word, score in vocabulary:
            self.insert(word, score)
            count += 1
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("inserted %d pairs, %d words, %d nodes", count, self._size, self.node_count())

    # search/traversal ---------------------------------------------------------
    def suggestions(self, prefix: str) -> List[Suggestion]:
        """
        Return up to top_k suggestions whose word starts with `prefix`,
        best first (score desc, then word desc).
        """
        node = self._root
        pos = 0
        while pos < len(prefix):
            edge = node.edges.get(prefix[pos])
            if edge is None:
                return []
            n = _common_prefix_len(edge.label, prefix, pos)
            if n == len(edge.label):
                node = edge.child
                pos += n
            elif pos + n == len(prefix):
                # prefix ends inside the label: everything below the edge matches
                return edge.child.top.sorted()
            else:
                return []
        return node.top.sorted()

    def _find(self, word: Word) -> Optional[TrieNode]:
        """Node where `word` ends exactly, if the path exists."""
        node = self._root
        pos = 0
        while pos < len(word):
            edge = node.edges.get(word[pos])
            if edge is None or not word.startswith(edge.label, pos):
                return None
            node = edge.child
            pos += len(edge.label)
        return node

    # convenience/debugging -----------------------------------------------------
    def walk(self) -> Iterator[Tuple[str, TrieNode]]:
        """
        Yield (path, node) for every node, root first.
        Uses an explicit stack so deep tries don't hit the recursion limit.
        """
        stack: List[Tuple[str, TrieNode]] = [("", self._root)]
        while stack:
            path, node = stack.pop()
            yield path, node
            for edge in node.edges.values():
                stack.append((path + edge.label, edge.child))

    def words(self) -> List[Suggestion]:
        """Terminal suggestions, unsorted. (O(N) walk, for inspection.)"""
        return [node.suggestion for _, node in self.walk() if node.suggestion is not None]

    def node_count(self) -> int:
        return sum(1 for _ in self.walk())

    def __len__(self) -> int:
        """Number of distinct words stored."""
        return self._size

    def __contains__(self, word: Word) -> bool:
        node = self._find(word)
        return node is not None and node.is_word

    def __repr__(self) -> str:
        return f"Trie(words={self._size}, top_k={self.top_k})"
