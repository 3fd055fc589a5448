"""
Start-up Self-Check Module

A handful of known-answer arithmetic checks the driver runs before a long
search, so a broken kernel fails in milliseconds instead of after minutes of
Fibonacci iteration.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Tuple

from .errors import SelfCheckFailed
from .fibonacci import fibonacci
from .logging_config import log_action
from .number import LargeNumber

logger = logging.getLogger(__name__)

FIBONACCI_CHECK_INDEX = 12


@dataclass
class SelfCheckReport:
    """Results of run_self_check"""
    passed: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    duration_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return not self.failed


def _native_fibonacci(n: int) -> int:
    previous, before = 1, 0
    if n == 0:
        return 0
    for _ in range(2, n + 1):
        previous, before = previous + before, previous
    return previous


def _checks() -> List[Tuple[str, Callable[[], bool]]]:
    lhs = LargeNumber.from_string("9876543210")
    rhs = LargeNumber.from_native(-9876543210)
    zero = LargeNumber.zero()

    def addition_cancels():
        result = lhs + rhs
        logger.debug(f"{lhs.dump()} + {rhs.dump()} = {result.dump()}")
        return result.is_zero() and result.is_positive()

    def subtracting_negative_adds():
        result = lhs - rhs
        logger.debug(f"{lhs.dump()} - {rhs.dump()} = {result.dump()}")
        return result.positive and result == LargeNumber.from_native(9876543210 * 2)

    def subtracting_zero():
        result = lhs - zero
        logger.debug(f"{lhs.dump()} - {zero.dump()} = {result.dump()}")
        return result == lhs

    def subtracting_from_zero():
        result = zero - lhs
        logger.debug(f"{zero.dump()} - {lhs.dump()} = {result.dump()}")
        return result == -lhs and result.is_negative()

    def parsed_cancels_native():
        result = LargeNumber.from_string("1234567890") + LargeNumber.from_native(-1234567890)
        return result.is_zero() and result.is_positive()

    def fibonacci_matches_native():
        expected = _native_fibonacci(FIBONACCI_CHECK_INDEX)
        result = fibonacci(FIBONACCI_CHECK_INDEX)
        logger.debug(f"Fibonacci({FIBONACCI_CHECK_INDEX}) expected {expected}, got {result.dump()}")
        return result == LargeNumber.from_native(expected)

    return [
        ("addition_cancels", addition_cancels),
        ("subtracting_negative_adds", subtracting_negative_adds),
        ("subtracting_zero", subtracting_zero),
        ("subtracting_from_zero", subtracting_from_zero),
        ("parsed_cancels_native", parsed_cancels_native),
        ("fibonacci_matches_native", fibonacci_matches_native),
    ]


def run_self_check() -> SelfCheckReport:
    """
    Run all known-answer checks

    Returns:
        SelfCheckReport listing passed checks and the elapsed time

    Raises:
        SelfCheckFailed: If any check returns a wrong answer
    """
    report = SelfCheckReport()
    started = time.perf_counter()

    for name, check in _checks():
        if check():
            report.passed.append(name)
        else:
            logger.error(f"Self-check '{name}' failed")
            report.failed.append(name)

    report.duration_seconds = time.perf_counter() - started
    log_action(
        logger, "info",
        f"Self-check duration: {report.duration_seconds:.6f} s",
        operation="self_check",
        extra={"passed": len(report.passed), "failed": len(report.failed)},
    )

    if report.failed:
        raise SelfCheckFailed(f"Self-check failed: {', '.join(report.failed)}")
    return report
