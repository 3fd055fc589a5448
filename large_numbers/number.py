"""
Large Number Module

LargeNumber is the public signed arbitrary-precision integer. It is an
immutable value: every operator returns a fresh instance and never touches
its operands.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .additive import signed_add, signed_subtract
from .comparison import compare_signed
from .conversion import (
    digits_to_native, dump_digits, format_digits, native_to_digits, parse_text
)
from .errors import SignMismatch
from .magnitude import ZERO, Digits, is_zero, trim, validate
from .magnitude import to_native as magnitude_to_native
from .multiplicative import (
    signed_divide_with_remainder, signed_multiply
)


@dataclass(frozen=True)
class LargeNumber:
    """
    Immutable signed integer of unbounded magnitude.

    Zero may carry either sign flag but always behaves as positive.
    Division truncates toward zero and the remainder follows the dividend.
    """
    magnitude: Digits = ZERO
    positive: bool = True

    def __post_init__(self):
        object.__setattr__(self, 'magnitude', trim(validate(self.magnitude)))
        object.__setattr__(self, 'positive', bool(self.positive))

    # Construction

    @classmethod
    def zero(cls) -> 'LargeNumber':
        return cls(ZERO, True)

    @classmethod
    def from_native(cls, value: int) -> 'LargeNumber':
        """Build from a Python int"""
        is_positive, digits = native_to_digits(value)
        return cls(digits, is_positive)

    @classmethod
    def from_string(cls, text: str, is_positive: Optional[bool] = None) -> 'LargeNumber':
        """
        Parse decimal text

        Args:
            text: Decimal text, see conversion.parse_text for accepted forms
            is_positive: Declared sign; when given it must agree with the
                sign found in the text. Zero is sign-agnostic and accepts
                either declaration

        Raises:
            SignMismatch: If the declared sign contradicts the parsed one
        """
        parsed_positive, digits = parse_text(text)
        if (is_positive is not None and not is_zero(digits)
                and bool(is_positive) != parsed_positive):
            raise SignMismatch(
                f"Sign mismatch: '{text}' was declared is_positive={is_positive} "
                f"but parses as is_positive={parsed_positive}"
            )
        return cls(digits, parsed_positive)

    @classmethod
    def fibonacci(cls, n: int) -> 'LargeNumber':
        """n-th Fibonacci number"""
        from .fibonacci import fibonacci_magnitude
        return cls(fibonacci_magnitude(n), True)

    # State checks

    def is_zero(self) -> bool:
        """Check if value is zero regardless of stored sign"""
        return is_zero(self.magnitude)

    def is_positive(self) -> bool:
        """Check if value is non-negative (zero counts as positive)"""
        return self.positive or self.is_zero()

    def is_negative(self) -> bool:
        """Check if value is below zero"""
        return not self.is_positive()

    def size(self) -> int:
        """Number of decimal digits in the magnitude"""
        return len(self.magnitude)

    # Conversion

    def to_native(self) -> int:
        """Narrow to a signed 64-bit int, raising Overflow if it does not fit"""
        return digits_to_native(self.is_positive(), self.magnitude)

    def get(self, width: int = 0, pad: str = "0") -> str:
        """Render with optional padding between sign and digits"""
        return format_digits(self.is_positive(), self.magnitude, width, pad)

    def to_string(self) -> str:
        return self.get()

    def dump(self) -> str:
        """Debug rendering showing the stored sign flag"""
        return dump_digits(self.positive, self.magnitude)

    def __str__(self) -> str:
        return self.get()

    def __repr__(self) -> str:
        return f"LargeNumber('{self.get()}')"

    def __int__(self) -> int:
        value = magnitude_to_native(self.magnitude)
        return value if self.is_positive() else -value

    def __hash__(self) -> int:
        return hash(int(self))

    def __bool__(self) -> bool:
        return not self.is_zero()

    # Arithmetic

    def _signed(self) -> Tuple[bool, Digits]:
        return self.is_positive(), self.magnitude

    def __add__(self, other: Union['LargeNumber', int]) -> 'LargeNumber':
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        is_positive, digits = signed_add(*self._signed(), *other._signed())
        return LargeNumber(digits, is_positive)

    def __radd__(self, other: int) -> 'LargeNumber':
        return self + other

    def __sub__(self, other: Union['LargeNumber', int]) -> 'LargeNumber':
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        # The raw sign flag is kept so that x - 0 returns x untouched
        is_positive, digits = signed_subtract(
            self.positive, self.magnitude, other.positive, other.magnitude
        )
        return LargeNumber(digits, is_positive)

    def __rsub__(self, other: int) -> 'LargeNumber':
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other - self

    def __mul__(self, other: Union['LargeNumber', int]) -> 'LargeNumber':
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        is_positive, digits = signed_multiply(*self._signed(), *other._signed())
        return LargeNumber(digits, is_positive)

    def __rmul__(self, other: int) -> 'LargeNumber':
        return self * other

    def __divmod__(self, other: Union['LargeNumber', int]) -> Tuple['LargeNumber', 'LargeNumber']:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        quotient, remainder = signed_divide_with_remainder(*self._signed(), *other._signed())
        return (
            LargeNumber(quotient[1], quotient[0]),
            LargeNumber(remainder[1], remainder[0]),
        )

    def __truediv__(self, other: Union['LargeNumber', int]) -> 'LargeNumber':
        """Integer quotient truncated toward zero"""
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[0]

    def __mod__(self, other: Union['LargeNumber', int]) -> 'LargeNumber':
        """Remainder with the sign of the dividend"""
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[1]

    def __rtruediv__(self, other: int) -> 'LargeNumber':
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other / self

    def __rmod__(self, other: int) -> 'LargeNumber':
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other % self

    def __rdivmod__(self, other: int) -> Tuple['LargeNumber', 'LargeNumber']:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return divmod(other, self)

    def __neg__(self) -> 'LargeNumber':
        if self.is_zero():
            return LargeNumber(ZERO, True)
        return LargeNumber(self.magnitude, not self.positive)

    def __abs__(self) -> 'LargeNumber':
        return LargeNumber(self.magnitude, True)

    # Comparison

    def _compare(self, other: 'LargeNumber') -> int:
        return compare_signed(self.positive, self.magnitude, other.positive, other.magnitude)

    def __eq__(self, other) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return False
        return self._compare(other) == 0

    def __lt__(self, other: Union['LargeNumber', int]) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other: Union['LargeNumber', int]) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other: Union['LargeNumber', int]) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other: Union['LargeNumber', int]) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) >= 0


def _coerce(value):
    if isinstance(value, LargeNumber):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return LargeNumber.from_native(value)
    return NotImplemented


def parse(text: str) -> LargeNumber:
    """Parse decimal text into a LargeNumber"""
    return LargeNumber.from_string(text)


def format_number(value: LargeNumber, width: int = 0, pad: str = "0") -> str:
    """Render a LargeNumber, padding between sign and digits up to width"""
    return value.get(width, pad)


def from_native(value: int) -> LargeNumber:
    return LargeNumber.from_native(value)


def to_native(value: LargeNumber) -> int:
    return value.to_native()


def dump(value: LargeNumber) -> str:
    return value.dump()
