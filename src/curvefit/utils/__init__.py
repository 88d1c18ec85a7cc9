"""Utility functions and helpers."""

from .timing import Stopwatch, timeit, section_timer
from .logging import setup_logging

__all__ = [
    "Stopwatch",
    "timeit",
    "section_timer",
    "setup_logging",
]
