"""Wall-clock timers that report through a logger."""
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from functools import wraps
from typing import Iterator, Optional


@dataclass
class Stopwatch:
    name: str
    elapsed: Optional[float] = None


@contextmanager
def section_timer(
    name: str,
    logger: logging.Logger,
    level: int = logging.INFO,
) -> Iterator[Stopwatch]:
    """Log how long the enclosed block took; the elapsed seconds stay on the yielded Stopwatch."""
    watch = Stopwatch(name)
    started = time.perf_counter()
    try:
        yield watch
    finally:
        watch.elapsed = time.perf_counter() - started
        logger.log(level, "TIMER %s took %.3f s", name, watch.elapsed)


def timeit(logger: logging.Logger, name: Optional[str] = None, level: int = logging.INFO):
    """Decorator form of section_timer, labelled with the function's qualname by default."""
    def deco(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            with section_timer(name or fn.__qualname__, logger, level):
                return fn(*args, **kwargs)
        return wrapper
    return deco
