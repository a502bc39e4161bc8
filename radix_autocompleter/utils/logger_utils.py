# logger_utils.py -  for logging messages and performance metrics, timestamps etc

import logging
import os
import time
from datetime import datetime
from typing import Optional

# Directory where metric lines are stored
LOG_DIR = "logs"

# Path to the default metrics file, can be overriden
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "autocompleter.log")

LOG_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"


def setup_logging(level: int = logging.WARNING) -> None:
    """Configure root logging once for the command line tools."""
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


class Log:
    """Lightweight helper for recording timings and other metrics."""

    path: Optional[str] = None  # overrides DEFAULT_LOG_PATH when set
    echo: bool = True

    @classmethod
    def metric(cls, tag, value, unit=""):
        """
        Record a metric (like timing, counts, or performance stats).
        Prints to the console and also appends it to the metrics file.
        Example: [12:45:02] trie build: 0.123s
        """
        ts = datetime.now().strftime("%H:%M:%S")
        line = f"[{ts}] {tag}: {value}{unit}"
        if cls.echo:
            print(line)
        path = cls.path or DEFAULT_LOG_PATH
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

    @staticmethod
    def time_block(label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("trie build"):
                Trie(words)
        It records how long the block took once it exits.
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """Record the block duration as a metric, in milliseconds."""
        self.elapsed = time.perf_counter() - self.start
        Log.metric(f"{self.label} done", round(self.elapsed * 1000.0, 1), "ms")
