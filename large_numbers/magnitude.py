"""
Magnitude Module

Unsigned arbitrary-precision values stored as tuples of decimal digits,
least-significant digit first. The number 1234 is held as (4, 3, 2, 1),
which keeps carry and borrow propagation walking forward through the tuple.

Tuples are immutable, so the shared ZERO and ONE constants can be handed out
freely without any consumer being able to corrupt them.
"""

from typing import Iterable, Tuple

from .errors import EmptyOperand, InvalidDigit

Digits = Tuple[int, ...]

BASE = 10

ZERO: Digits = (0,)
ONE: Digits = (1,)


def validate(digits: Iterable[int]) -> Digits:
    """
    Check a digit sequence and return it as a tuple

    Raises:
        EmptyOperand: If the sequence is empty
        InvalidDigit: If an entry is not an int in [0, 9]
    """
    result = tuple(digits)
    if not result:
        raise EmptyOperand("Digit sequence must not be empty")
    for digit in result:
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit < BASE:
            raise InvalidDigit(f"Invalid digit {digit!r} in magnitude", character=digit)
    return result


def trim(digits: Iterable[int]) -> Digits:
    """
    Drop most-significant zero digits

    Because storage is reversed, "000123" is (3, 2, 1, 0, 0, 0) and trimming
    pops zeros off the end until one digit is left or the last is nonzero.

    Raises:
        EmptyOperand: If the sequence is empty
    """
    result = list(digits)
    if not result:
        raise EmptyOperand("Cannot trim an empty digit sequence")
    while len(result) > 1 and result[-1] == 0:
        result.pop()
    return tuple(result)


def is_zero(digits: Digits) -> bool:
    """True for the canonical zero as well as untrimmed runs of zeros"""
    return all(digit == 0 for digit in digits)


def from_native(value: int) -> Digits:
    """Extract the digits of a non-negative int, least significant first"""
    if value < 0:
        raise ValueError(f"Magnitude cannot be built from negative value {value}")
    if value == 0:
        return ZERO

    digits = []
    while value > 0:
        value, digit = divmod(value, BASE)
        digits.append(digit)
    return tuple(digits)


def to_native(digits: Digits) -> int:
    """Fold a digit sequence back into an int"""
    result = 0
    for digit in reversed(digits):
        result = result * BASE + digit
    return result


def render(digits: Digits) -> str:
    """Digits most-significant first, no sign"""
    return "".join(str(digit) for digit in reversed(digits))
