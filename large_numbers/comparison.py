"""
Comparison Engine Module

Total ordering over magnitudes, lifted to signed values.

Magnitudes order by width first, then digit by digit from the most
significant end. Signed values follow standard integer ordering: every
negative is below every non-negative, zero ignores its stored sign, and among
negatives the larger magnitude is the smaller value.
"""

from .magnitude import Digits, is_zero


def equal(left: Digits, right: Digits) -> bool:
    """Same width and identical digits"""
    if len(left) != len(right):
        return False
    for left_digit, right_digit in zip(left, right):
        if left_digit != right_digit:
            return False
    return True


def less_than(left: Digits, right: Digits) -> bool:
    """Strict magnitude ordering; inputs are expected in canonical form"""
    if len(left) != len(right):
        return len(left) < len(right)
    for index in range(len(left) - 1, -1, -1):
        if left[index] != right[index]:
            return left[index] < right[index]
    return False


def compare(left: Digits, right: Digits) -> int:
    """Three-way magnitude comparison returning -1, 0 or 1"""
    if less_than(left, right):
        return -1
    if less_than(right, left):
        return 1
    return 0


def compare_signed(left_positive: bool, left: Digits,
                   right_positive: bool, right: Digits) -> int:
    """
    Three-way comparison of two signed values

    Args:
        left_positive: Stored sign flag of the left operand
        left: Left magnitude
        right_positive: Stored sign flag of the right operand
        right: Right magnitude

    Returns:
        -1, 0 or 1
    """
    # Positive zero rule
    left_positive = left_positive or is_zero(left)
    right_positive = right_positive or is_zero(right)

    if left_positive and not right_positive:
        return 1
    if not left_positive and right_positive:
        return -1

    result = compare(left, right)
    return result if left_positive else -result
