"""
Conversion Module

Text and native-integer conversion for signed digit tuples. Parsing accepts
the human formats people actually paste (thousands separators, a trailing
fraction) and formatting supports fixed-width alignment.
"""

import logging
from typing import Final

from .additive import SignedDigits
from .errors import EmptyInput, InvalidDigit, Overflow
from .magnitude import ZERO, from_native, is_zero, render, to_native, trim

logger = logging.getLogger(__name__)

# Stripped before parsing: 1,234 / 1_234 / 1'234 / 1 234
SEPARATORS: Final = (",", "_", "'", " ")
DECIMAL_DIGITS: Final = frozenset("0123456789")

# Widest magnitude a signed 64-bit integer can hold
NATIVE_MAX_DIGITS: Final[int] = 19
NATIVE_MIN: Final[int] = -(2 ** 63)
NATIVE_MAX: Final[int] = 2 ** 63 - 1


def parse_text(text: str) -> SignedDigits:
    """
    Parse a signed decimal string

    An optional leading '-' marks a negative value. Anything from the first
    '.' onward is truncated, not rounded (1234.567 -> 1234). Separators are
    stripped and leading zeros discarded.

    Args:
        text: Decimal text

    Returns:
        Tuple of (is_positive, magnitude); zero is always positive

    Raises:
        EmptyInput: If the text is empty or has no digits before the '.'
        InvalidDigit: If any other non-digit character remains
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")
    if not text:
        raise EmptyInput("Empty string")

    body = text
    is_positive = True
    if body[0] == "-":
        is_positive = False
        body = body[1:]

    point = body.find(".")
    if point != -1:
        body = body[:point]

    for separator in SEPARATORS:
        body = body.replace(separator, "")

    if not body:
        raise EmptyInput(f"No digits in '{text}'")

    for character in body:
        if character not in DECIMAL_DIGITS:
            logger.debug(f"Invalid character {character!r} in string '{text}'")
            raise InvalidDigit(f"Invalid character '{character}' in string '{text}'",
                               character=character)

    body = body.lstrip("0")
    if not body:
        return (True, ZERO)

    digits = tuple(int(character) for character in reversed(body))
    return (is_positive, digits)


def format_digits(is_positive: bool, digits, width: int = 0, pad: str = "0") -> str:
    """
    Render a signed magnitude most-significant first

    When width exceeds the natural length the pad character goes between the
    sign and the digits, never in front of the sign: -5 at width 5 is "-0005".

    Args:
        is_positive: Sign flag
        digits: Magnitude
        width: Minimum total width; 0 disables padding
        pad: Single padding character, usually '0' or ' '
    """
    if not isinstance(pad, str) or len(pad) != 1:
        raise ValueError(f"Padding must be a single character, got {pad!r}")

    sign = "" if is_positive or is_zero(digits) else "-"
    body = render(trim(digits))
    natural = len(sign) + len(body)
    if width > natural:
        body = pad * (width - natural) + body
    return sign + body


def dump_digits(is_positive: bool, digits) -> str:
    """Debug rendering: a leading space for positive values, '-' otherwise"""
    return (" " if is_positive else "-") + render(digits)


def native_to_digits(value: int) -> SignedDigits:
    """Split a native int into (is_positive, magnitude)"""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    return (value >= 0, from_native(abs(value)))


def digits_to_native(is_positive: bool, digits) -> int:
    """
    Narrow a signed magnitude to a signed 64-bit int

    Raises:
        Overflow: If the magnitude is wider than 19 digits or outside the
            signed 64-bit range
    """
    digits = trim(digits)
    if len(digits) > NATIVE_MAX_DIGITS:
        raise Overflow(f"Number too large to fit in i64: {len(digits)} digits")

    value = to_native(digits)
    if not is_positive:
        value = -value
    if not NATIVE_MIN <= value <= NATIVE_MAX:
        raise Overflow(f"Number {value} outside the signed 64-bit range")
    return value
