"""
Fibonacci Accelerator Module

Computes Fibonacci numbers of any size using only magnitude addition, and
searches for the first index whose Fibonacci number reaches a target digit
count.

Everything here is iterative with a rolling window of the two previous
terms. A recursive definition needs call depth proportional to n and would
exhaust the stack long before the thousand-digit range.
"""

import logging
import time
from dataclasses import dataclass
from typing import Iterator, Tuple

from .additive import add
from .errors import NegativeIndex
from .logging_config import log_action
from .magnitude import ONE, ZERO, Digits
from .number import LargeNumber

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a digit-count search"""
    index: int
    digit_count: int
    duration_seconds: float
    value: LargeNumber


def _check_index(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Fibonacci index must be an int, got {type(n).__name__}")
    if n < 0:
        raise NegativeIndex(f"Fibonacci index must be >= 0, got {n}")


def fibonacci_magnitude(n: int) -> Digits:
    """
    n-th Fibonacci number as a magnitude

    F(0) = 0, F(1) = 1, F(i) = F(i-1) + F(i-2)

    Raises:
        NegativeIndex: If n < 0
    """
    _check_index(n)
    if n == 0:
        return ZERO
    if n == 1:
        return ONE

    previous = ONE    # F(i-1)
    before = ZERO     # F(i-2)
    current = ONE
    for _ in range(2, n + 1):
        current = add(previous, before)
        before = previous
        previous = current
    return current


def fibonacci(n: int) -> LargeNumber:
    """n-th Fibonacci number as a LargeNumber"""
    return LargeNumber(fibonacci_magnitude(n), True)


def iter_fibonacci(start: int = 0) -> Iterator[Tuple[int, Digits]]:
    """
    Yield (index, magnitude) pairs from start onward, indefinitely

    The first term is computed with fibonacci_magnitude; each following term
    costs a single addition.
    """
    _check_index(start)
    index = start
    current = fibonacci_magnitude(start)
    following = fibonacci_magnitude(start + 1)
    while True:
        yield index, current
        current, following = following, add(current, following)
        index += 1


def find_first_index_with_digits(target_digits: int, start_index: int = 0,
                                 progress_interval: int = 500) -> SearchResult:
    """
    Find the smallest index >= start_index whose Fibonacci number has at
    least target_digits digits

    Args:
        target_digits: Digit count to reach
        start_index: First index to consider
        progress_interval: Log a DEBUG progress line every this many indices;
            0 disables progress logging

    Returns:
        SearchResult with the index, its digit count and elapsed time

    Raises:
        ValueError: If target_digits < 1 or start_index < 0
    """
    if target_digits < 1:
        raise ValueError(f"target_digits must be at least 1, got {target_digits}")
    if start_index < 0:
        raise ValueError(f"start_index must be >= 0, got {start_index}")

    logger.info(f"Searching for first Fibonacci number with {target_digits} digits "
                f"from index {start_index}")
    started = time.perf_counter()

    for index, digits in iter_fibonacci(start_index):
        if len(digits) >= target_digits:
            break
        if progress_interval and index and index % progress_interval == 0:
            logger.debug(f"Index {index}: {len(digits)} digits")

    duration = time.perf_counter() - started
    result = SearchResult(
        index=index,
        digit_count=len(digits),
        duration_seconds=duration,
        value=LargeNumber(digits, True),
    )
    log_action(
        logger, "info",
        f"Final Index: {result.index} - {result.digit_count} digits",
        operation="fibonacci_search",
        extra={
            "index": result.index,
            "digit_count": result.digit_count,
            "duration_seconds": round(duration, 6),
        },
    )
    return result
