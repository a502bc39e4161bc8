"""
cli.py - command line front-end for the autocompleter
Features:
- Loads a word list and builds a trie (or naive) index behind a spinner
- One-shot mode: --query PREFIX prints the suggestions and exits
- Prompt loop: every line entered is treated as a prefix
- Uses Rich for tables and formatting
"""

from __future__ import annotations

import argparse
import logging
import statistics
import sys
import time
from typing import List, Optional, Sequence

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.prompt import Prompt
from rich import box
from rich.markup import escape

from radix_autocompleter.core.autocompleter import KINDS, build_autocompleter
from radix_autocompleter.core.protocols import AutoCompleterProtocol, to_records
from radix_autocompleter.core.suggestion import Suggestion
from radix_autocompleter.utils.config_manager import Config
from radix_autocompleter.utils.logger_utils import setup_logging
from radix_autocompleter.utils.vocab_loader import load_vocabulary

logger = logging.getLogger(__name__)

# initialise console for rich output
console = Console()


class CLI:
    """Prompt loop around one autocompleter."""

    def __init__(self, ac: AutoCompleterProtocol, kind: str, vocab_size: int):
        self.ac = ac
        self.kind = kind
        self.vocab_size = vocab_size
        self.latencies: List[float] = []  # ms per query
        self.running = True

    def run(self):
        """
        Main interactive loop:
        - Prompts the user for a prefix.
        - Handles commands like /quit, /stats.
        - Shows the suggestions for everything else.
        """
        console.rule("[bold magenta]Autocomplete[/bold magenta]")
        console.print("[cyan]Type a prefix to see suggestions.[/cyan]")
        console.print("Commands: /quit /kind /stats\n")

        while self.running:
            try:
                prefix = Prompt.ask("[green]Prefix[/green]", default="", show_default=False, console=console)
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break

            if prefix.startswith("/"):
                self._handle_command(prefix)
                continue
            self.show(prefix)

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, cmd: str):
        if cmd == "/quit":
            self._exit()
            return

        if cmd == "/kind":
            console.print(f"Autocompleter: [bold]{self.kind}[/bold]")
            return

        if cmd == "/stats":
            console.print(self._stats_table())
            return

        console.print(f"[red]Unknown command:[/red] {escape(cmd)}")

    # QUERY + DISPLAY -------------------------------------------------------------
    def query(self, prefix: str) -> List[Suggestion]:
        t0 = time.perf_counter()
        out = self.ac.suggestions(prefix)
        self.latencies.append((time.perf_counter() - t0) * 1000.0)
        return out

    def show(self, prefix: str):
        suggestions = self.query(prefix)
        if not suggestions:
            console.print("[dim]No suggestions[/dim]")
            return
        console.print(self._suggestion_table(prefix, suggestions))

    def _suggestion_table(self, prefix: str, suggestions: List[Suggestion]) -> Table:
        """Prefix underlined, completed part bold."""
        table = Table(title=f"Suggestions for '{escape(prefix)}'", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word")
        table.add_column("Score", justify="right", style="magenta")

        for rec in to_records(suggestions):
            word = rec["word"]
            table.add_row(
                str(rec["rank"]),
                Text.assemble((prefix, "underline"), (word[len(prefix):], "bold")),
                str(rec["score"]),
            )
        return table

    def _stats_table(self) -> Table:
        t = Table(title="Session Stats", box=box.MINIMAL)
        t.add_column("Metric", style="cyan")
        t.add_column("Value", style="white")
        t.add_row("Autocompleter", self.kind)
        t.add_row("Vocabulary", str(self.vocab_size))
        node_count = getattr(self.ac, "node_count", None)
        if callable(node_count):
            t.add_row("Trie nodes", str(node_count()))
        t.add_row("Queries", str(len(self.latencies)))
        if self.latencies:
            t.add_row("Mean latency", f"{statistics.mean(self.latencies):.4f} ms")
        return t

    # EXIT ------------------------------------------------------------------------
    def _exit(self):
        console.rule("[red]Exiting[/red]")
        self.running = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="radix-autocomplete", description="Prefix autocomplete over a word list")
    parser.add_argument("--kind", choices=KINDS, default=None, help="index implementation")
    parser.add_argument("--words", type=str, default=None, help="word list file")
    parser.add_argument("--config", type=str, default="config.json", help="JSON config file")
    parser.add_argument("--top-k", type=int, default=None, dest="top_k", help="suggestions per query")
    parser.add_argument("--query", action="append", default=None, help="print suggestions for PREFIX and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="log build steps")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.INFO if args.verbose else logging.WARNING)

    cfg = Config(args.config)
    kind = args.kind or cfg.get("autocompleter")
    words = args.words or cfg.get("word_file")
    top_k = args.top_k if args.top_k is not None else cfg.get("max_suggestions")

    try:
        with console.status(f"Reading suggestions from {escape(str(words))}..."):
            t0 = time.perf_counter()
            vocab = load_vocabulary(words)
            t1 = time.perf_counter()
        with console.status(f"Initializing the {escape(str(kind))} autocompleter for {len(vocab)} suggestions..."):
            ac = build_autocompleter(kind, vocab, top_k=top_k)
            t2 = time.perf_counter()
    except (OSError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1

    logger.info("read %d entries in %.0f ms, built index in %.0f ms", len(vocab), (t1 - t0) * 1000.0, (t2 - t1) * 1000.0)
    cli = CLI(ac, kind, len(vocab))

    if args.query:
        for prefix in args.query:
            cli.show(prefix)
        return 0

    cli.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
