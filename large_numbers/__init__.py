"""
Large Numbers

Arbitrary-precision signed integers stored as decimal digit tuples, with
sign-aware add, subtract, multiply, truncating divide and modulo, and an
iterative Fibonacci accelerator built on top.
"""

__version__ = "1.0.0"

from .errors import (
    DivisionByZero, EmptyInput, EmptyOperand, InvalidDigit,
    InvalidSubtractionOrder, LargeNumberError, NegativeIndex, Overflow,
    SelfCheckFailed, SignMismatch
)
from .magnitude import ONE, ZERO
from .number import LargeNumber, dump, format_number, from_native, parse, to_native
from .fibonacci import SearchResult, fibonacci, find_first_index_with_digits
