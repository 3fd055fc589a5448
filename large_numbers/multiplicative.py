"""
Multiplicative Core Module

Schoolbook multiplication and long division over digit tuples, plus the sign
dispatch for signed products, quotients and remainders.

Division truncates toward zero: the quotient sign is the XOR of the operand
signs and the remainder takes the sign of the dividend, so
(a / b) * b + (a % b) == a always holds. Python's own // and % floor
instead, which differs whenever the signs are mixed.
"""

import logging
from typing import Tuple

from .additive import SignedDigits, subtract
from .comparison import less_than
from .errors import DivisionByZero
from .magnitude import BASE, ZERO, Digits, is_zero, render, trim

logger = logging.getLogger(__name__)


def multiply(left: Digits, right: Digits) -> Digits:
    """
    Multiply two magnitudes with the schoolbook method

    Every partial product left[i] * right[j] is accumulated into slot i + j
    and slots may exceed 9 until a single carry pass at the end. O(n * m)
    digit products; Karatsuba would be the next step for very wide operands.
    """
    left = trim(left)
    right = trim(right)
    if is_zero(left) or is_zero(right):
        return ZERO

    accumulator = [0] * (len(left) + len(right))
    for i, left_digit in enumerate(left):
        if left_digit == 0:
            continue
        for j, right_digit in enumerate(right):
            accumulator[i + j] += left_digit * right_digit

    carry = 0
    for index in range(len(accumulator)):
        carry, accumulator[index] = divmod(accumulator[index] + carry, BASE)
    while carry:
        carry, digit = divmod(carry, BASE)
        accumulator.append(digit)
    return trim(accumulator)


def divide_with_remainder(dividend: Digits, divisor: Digits) -> Tuple[Digits, Digits]:
    """
    Long division of two magnitudes

    Walks the dividend from its most significant digit, shifting each digit
    into a running remainder and taking the largest q in [0, 9] with
    q * divisor <= remainder by repeated subtraction.

    Returns:
        Tuple of (quotient, remainder)

    Raises:
        DivisionByZero: If the divisor is zero
    """
    dividend = trim(dividend)
    divisor = trim(divisor)
    if is_zero(divisor):
        logger.debug(f"Division of {render(dividend)} by zero rejected")
        raise DivisionByZero("Division by zero")
    if less_than(dividend, divisor):
        return ZERO, dividend

    quotient = []
    remainder = ZERO
    for digit in reversed(dividend):
        remainder = trim((digit,) + remainder)
        q = 0
        while not less_than(remainder, divisor):
            remainder = subtract(remainder, divisor)
            q += 1
        quotient.append(q)

    quotient.reverse()
    return trim(quotient), remainder


def _signed(is_positive: bool, digits: Digits) -> SignedDigits:
    return (is_positive or is_zero(digits), digits)


def signed_multiply(left_positive: bool, left: Digits,
                    right_positive: bool, right: Digits) -> SignedDigits:
    """Product sign is the XOR of operand signs; a zero product is positive"""
    left_positive = left_positive or is_zero(left)
    right_positive = right_positive or is_zero(right)
    return _signed(left_positive == right_positive, multiply(left, right))


def signed_divide_with_remainder(left_positive: bool, left: Digits,
                                 right_positive: bool, right: Digits
                                 ) -> Tuple[SignedDigits, SignedDigits]:
    """
    Truncating signed division

    Returns:
        Tuple of ((quotient_positive, quotient), (remainder_positive, remainder))
    """
    left_positive = left_positive or is_zero(left)
    right_positive = right_positive or is_zero(right)
    quotient, remainder = divide_with_remainder(left, right)
    return (
        _signed(left_positive == right_positive, quotient),
        _signed(left_positive, remainder),
    )


def signed_divide(left_positive: bool, left: Digits,
                  right_positive: bool, right: Digits) -> SignedDigits:
    """Quotient rounded toward zero"""
    quotient, _ = signed_divide_with_remainder(left_positive, left, right_positive, right)
    return quotient


def signed_modulo(left_positive: bool, left: Digits,
                  right_positive: bool, right: Digits) -> SignedDigits:
    """Remainder carrying the dividend's sign"""
    _, remainder = signed_divide_with_remainder(left_positive, left, right_positive, right)
    return remainder
