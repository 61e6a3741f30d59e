"""
Wall-clock timing helpers.
"""

import time
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Tuple

from .logging import get_logger

logger = get_logger(__name__)


def time_it(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Tuple[Any, float]:
    """
    Call ``func`` and measure how long it took.

    Returns:
        Tuple of (result, elapsed seconds)
    """
    start = time.perf_counter()
    result = func(*args, **kwargs)
    elapsed = time.perf_counter() - start
    logger.debug("%s took %.6fs", getattr(func, "__qualname__", repr(func)), elapsed)
    return result, elapsed


class Timer:
    """Elapsed-time holder filled in by :func:`timer`."""

    def __init__(self, label: str):
        self.label = label
        self.elapsed: float = 0.0

    def __repr__(self) -> str:
        return f"Timer({self.label!r}, elapsed={self.elapsed:.6f})"


@contextmanager
def timer(label: str) -> Iterator[Timer]:
    """
    Time a block of code.

    Example:
        with timer("multiply") as t:
            p * q
        t.elapsed  # seconds
    """
    record = Timer(label)
    start = time.perf_counter()
    try:
        yield record
    finally:
        record.elapsed = time.perf_counter() - start
        logger.debug("%s took %.6fs", label, record.elapsed)
