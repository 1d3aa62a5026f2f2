# logger_utils.py - logging setup and timing helpers

import logging
import time
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger("trie_dictionary")


def setup_logging(level: Union[str, int] = "WARNING", console: Optional[Console] = None) -> None:
    """
    Route the package logger through a RichHandler.
    Library code only calls logging.getLogger(__name__); handlers are attached here,
    by the application, never on import.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"unknown log level: {level}")
        level = resolved

    # replace a previous rich handler so repeated setup does not double output
    for h in list(logger.handlers):
        if isinstance(h, RichHandler):
            logger.removeHandler(h)

    handler = RichHandler(console=console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)


class Log:
    """Small helpers for recording metrics and timing code blocks."""

    @staticmethod
    def metric(tag: str, value, unit: str = "") -> None:
        """
        Record a metric (timings, counts).
        Example: suggest done: 0.004s
        """
        logger.info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label: str) -> "_Timer":
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("load") as t:
                do_some_work()
            t.elapsed  # seconds
        The duration is also recorded as a metric on exit.
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, label: str):
        self.label = label
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        Log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
