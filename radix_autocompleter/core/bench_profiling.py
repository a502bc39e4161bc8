# bench_profiling.py
"""
Benchmark harness comparing Trie against NaiveAutoCompleter.

First checks that both indexes agree on every prefix, then measures
per-query latency for each.

Usage:
    python -m radix_autocompleter.core.bench_profiling --words all_words.txt --runs 200
"""

from __future__ import annotations
import argparse
import logging
import random
import statistics
import string
import sys
from typing import Dict, List, Optional, Sequence

from radix_autocompleter.core.naive import NaiveAutoCompleter
from radix_autocompleter.core.protocols import AutoCompleterProtocol
from radix_autocompleter.core.suggestion import Candidate
from radix_autocompleter.core.trie import Trie
from radix_autocompleter.utils.cache_utils import timed
from radix_autocompleter.utils.logger_utils import Log, setup_logging
from radix_autocompleter.utils.vocab_loader import load_vocabulary

logger = logging.getLogger(__name__)

DEFAULT_PREFIXES = [
    "imm", "ca", "di", "impe", "inter", "pre", "trans", "sub",
    "non", "un", "mid", "anti", "in", "re", "over",
]


def synthetic_vocabulary(size: int = 20_000, seed: int = 7) -> List[Candidate]:
    """Random lowercase words scored by length, like a plain word list."""
    rng = random.Random(seed)
    out: List[Candidate] = []
    for _ in range(size):
        word = "".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(2, 12)))
        out.append((word, len(word)))
    return out


def validate_outputs(prefixes: Sequence[str], trie: Trie, naive: NaiveAutoCompleter) -> List[str]:
    """Prefixes on which the two indexes disagree (empty when all match)."""
    return [p for p in prefixes if trie.suggestions(p) != naive.suggestions(p)]


def profile(ac: AutoCompleterProtocol, prefixes: Sequence[str], runs: int = 200, warmup: int = 20) -> List[float]:
    """Latency in ms of `runs` queries, cycling through `prefixes`."""
    query = timed(ac.suggestions)
    for i in range(warmup):
        ac.suggestions(prefixes[i % len(prefixes)])

    times = []
    for i in range(runs):
        _, ms = query(prefixes[i % len(prefixes)])
        times.append(ms)
    return times


def summarize(times: Sequence[float]) -> Dict[str, float]:
    times_sorted = sorted(times)
    return {
        "count": len(times_sorted),
        "mean_ms": statistics.mean(times_sorted),
        "median_ms": statistics.median(times_sorted),
        "p90_ms": times_sorted[max(int(0.9 * len(times_sorted)) - 1, 0)],
        "max_ms": times_sorted[-1],
    }


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Compare trie and naive autocompleters")
    parser.add_argument("--words", type=str, default=None, help="word list (default: synthetic)")
    parser.add_argument("--runs", type=int, default=200)
    parser.add_argument("--warmup", type=int, default=20)
    parser.add_argument("--prefix", action="append", dest="prefixes", help="prefix to query (repeatable)")
    args = parser.parse_args(argv)
    if args.runs < 1:
        parser.error("--runs must be at least 1")
    if args.warmup < 0:
        parser.error("--warmup must not be negative")
    setup_logging(logging.INFO)

    vocab = load_vocabulary(args.words) if args.words else synthetic_vocabulary()
    prefixes = args.prefixes or DEFAULT_PREFIXES

    with Log.time_block("trie build"):
        trie = Trie(vocab)
    with Log.time_block("naive build"):
        naive = NaiveAutoCompleter(vocab)

    bad = validate_outputs(prefixes, trie, naive)
    if bad:
        logger.error("trie and naive disagree on prefixes: %s", ", ".join(bad))
        return 1
    print(f"Validated that the outputs match for {len(prefixes)} prefixes")

    for name, ac in (("trie", trie), ("naive", naive)):
        s = summarize(profile(ac, prefixes, runs=args.runs, warmup=args.warmup))
        print("%-5s mean=%.4f median=%.4f p90=%.4f max=%.4f (ms, %d calls)" % (
            name, s["mean_ms"], s["median_ms"], s["p90_ms"], s["max_ms"], s["count"],
        ))
    return 0


if __name__ == "__main__":
    sys.exit(main())
