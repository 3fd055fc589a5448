"""
Error Types Module

Every failure raised by the arithmetic engine derives from LargeNumberError,
which is itself a ValueError so existing callers catching ValueError keep working.
"""


class LargeNumberError(ValueError):
    """Base class for all large number failures"""
    pass


class EmptyInput(LargeNumberError):
    """Text to parse was empty or held no digits"""
    pass


class InvalidDigit(LargeNumberError):
    """A character or digit value outside 0-9 was encountered"""

    def __init__(self, message: str, character=None):
        super().__init__(message)
        self.character = character


class SignMismatch(LargeNumberError):
    """Declared sign contradicts the sign recovered by parsing"""
    pass


class EmptyOperand(LargeNumberError):
    """A digit sequence handed to a kernel was empty"""
    pass


class InvalidSubtractionOrder(LargeNumberError):
    """
    Unsigned subtraction was asked to compute a - b with a < b.

    This is an internal precondition violation and points at a bug in the
    caller's sign dispatch, not at bad user input.
    """
    pass


class DivisionByZero(LargeNumberError, ZeroDivisionError):
    """Divisor magnitude is zero"""
    pass


class Overflow(LargeNumberError, OverflowError):
    """Value does not fit in a signed 64-bit native integer"""
    pass


class NegativeIndex(LargeNumberError):
    """Fibonacci index below zero"""
    pass


class SelfCheckFailed(LargeNumberError):
    """Start-up arithmetic self-check produced a wrong answer"""
    pass
