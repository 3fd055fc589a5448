"""
Additive Core Module

Unsigned addition and subtract-with-borrow over digit tuples, plus the sign
dispatch that reduces signed addition and subtraction to those two kernels.

Worked example of the borrow pass for 87654 - 780:

    ((4 - 0) +  0) - 0 = 4   no borrow
    ((5 - 0) + 10) - 8 = 7   borrow from next digit
    ((6 - 1) + 10) - 7 = 8   borrow from next digit
    ((7 - 1) +  0) - 0 = 6   no borrow
    ((8 - 0) +  0) - 0 = 8   no borrow
                            = 86874
"""

import logging
from typing import Callable, Dict, Tuple

from .comparison import compare, less_than
from .errors import InvalidSubtractionOrder
from .magnitude import BASE, ZERO, Digits, is_zero, render, trim

logger = logging.getLogger(__name__)

# (is_positive, magnitude)
SignedDigits = Tuple[bool, Digits]


def add(left: Digits, right: Digits) -> Digits:
    """
    Add two magnitudes

    A missing digit on the narrower side counts as 0 and a carry left over
    after the widest digit becomes a new most-significant digit.
    """
    left = trim(left)
    right = trim(right)
    if is_zero(right):
        return left
    if is_zero(left):
        return right

    result = []
    carry = 0
    for index in range(max(len(left), len(right))):
        total = carry
        if index < len(left):
            total += left[index]
        if index < len(right):
            total += right[index]
        carry, digit = divmod(total, BASE)
        result.append(digit)
    if carry:
        result.append(carry)
    return trim(result)


def subtract(left: Digits, right: Digits) -> Digits:
    """
    Subtract right from left, where left >= right

    Raises:
        InvalidSubtractionOrder: If left < right
    """
    left = trim(left)
    right = trim(right)
    if less_than(left, right):
        logger.debug(f"Refusing to subtract {render(right)} from smaller {render(left)}")
        raise InvalidSubtractionOrder(
            f"Cannot subtract {render(right)} from smaller value {render(left)}"
        )
    if is_zero(right):
        return left

    result = []
    borrow = 0
    for index in range(len(left)):
        right_digit = right[index] if index < len(right) else 0
        digit = left[index] - borrow - right_digit
        if digit < 0:
            digit += BASE
            borrow = 1
        else:
            borrow = 0
        result.append(digit)

    if borrow:
        # Unreachable while the ordering check above holds
        raise InvalidSubtractionOrder("Borrow still pending after subtraction")
    return trim(result)


def _signed(is_positive: bool, digits: Digits) -> SignedDigits:
    # Zero results are always reported positive
    return (is_positive or is_zero(digits), digits)


def _add_same_signs(left_positive: bool, left: Digits,
                    right_positive: bool, right: Digits) -> SignedDigits:
    return _signed(left_positive, add(left, right))


def _add_mixed_signs(left_positive: bool, left: Digits,
                     right_positive: bool, right: Digits) -> SignedDigits:
    order = compare(left, right)
    if order == 0:
        return (True, ZERO)
    if order > 0:
        return _signed(left_positive, subtract(left, right))
    return _signed(right_positive, subtract(right, left))


_ADD_DISPATCH: Dict[Tuple[bool, bool], Callable[..., SignedDigits]] = {
    (True, True): _add_same_signs,
    (False, False): _add_same_signs,
    (True, False): _add_mixed_signs,
    (False, True): _add_mixed_signs,
}


def signed_add(left_positive: bool, left: Digits,
               right_positive: bool, right: Digits) -> SignedDigits:
    """
    Add two signed values

    Same signs add magnitudes and keep the sign. Mixed signs subtract the
    smaller magnitude from the larger and take the larger operand's sign.

    Returns:
        Tuple of (is_positive, magnitude)
    """
    left = trim(left)
    right = trim(right)
    left_positive = left_positive or is_zero(left)
    right_positive = right_positive or is_zero(right)
    kernel = _ADD_DISPATCH[(left_positive, right_positive)]
    return kernel(left_positive, left, right_positive, right)


def signed_subtract(left_positive: bool, left: Digits,
                    right_positive: bool, right: Digits) -> SignedDigits:
    """
    Subtract right from left as left + (-right)

    Subtracting zero hands back the left operand with its original sign.

    Returns:
        Tuple of (is_positive, magnitude)
    """
    left = trim(left)
    right = trim(right)
    if is_zero(right):
        return (left_positive, left)
    return signed_add(left_positive, left, not right_positive, right)
