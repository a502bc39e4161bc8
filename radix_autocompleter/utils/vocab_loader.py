# vocab_loader.py
# Reads a word list into (word, score) pairs for index construction.
# One entry per line, either
#   word            -> score is len(word)
#   word<TAB>score  -> explicit non-negative integer score

from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List, Union

from radix_autocompleter.core.suggestion import Candidate

logger = logging.getLogger(__name__)


class VocabularyFormatError(ValueError):
    """A word list line could not be parsed."""

    def __init__(self, lineno: int, line: str, reason: str) -> None:
        super().__init__(f"line {lineno}: {reason}: {line!r}")
        self.lineno = lineno
        self.line = line


def parse_lines(lines: Iterable[str]) -> List[Candidate]:
    """Parse word list lines; blank lines are skipped."""
    out: List[Candidate] = []
    for lineno, raw in enumerate(lines, 1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        if "\t" not in line:
            word = line.rstrip()
            out.append((word, len(word)))
            continue

        word, _, score_text = line.rpartition("\t")
        score_text = score_text.strip()
        if not word:
            raise VocabularyFormatError(lineno, line, "missing word")
        if not (score_text.isascii() and score_text.isdigit()):
            raise VocabularyFormatError(lineno, line, "score must be a non-negative integer")
        out.append((word, int(score_text)))
    return out


def load_vocabulary(path: Union[str, Path]) -> List[Candidate]:
    """Load a UTF-8 word list. A missing file raises FileNotFoundError."""
    with open(path, "r", encoding="utf-8") as f:
        vocab = parse_lines(f)
    logger.info("loaded %d entries from %s", len(vocab), path)
    return vocab
