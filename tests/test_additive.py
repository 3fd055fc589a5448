"""
Test suite for additive module

Tests unsigned add with carry, subtract with borrow, and the four sign cases
of signed addition and subtraction.
"""

import itertools

import pytest

from large_numbers.additive import add, signed_add, signed_subtract, subtract
from large_numbers.errors import EmptyOperand, InvalidSubtractionOrder
from large_numbers.magnitude import ONE, ZERO, from_native, to_native


def digits(value):
    return from_native(value)


def as_int(result):
    is_positive, magnitude = result
    value = to_native(magnitude)
    return value if is_positive else -value


class TestUnsignedAdd:
    """Test magnitude addition"""

    def test_add_with_final_carry(self):
        """Test 91239 + 87654 = 178893 grows by one digit"""
        assert add(digits(91239), digits(87654)) == digits(178893)

    def test_add_differing_widths(self):
        assert add(digits(5), digits(99995)) == digits(100000)
        assert add(digits(99995), digits(5)) == digits(100000)

    def test_carry_chain(self):
        """Test a carry rippling across every digit"""
        assert add(digits(999999), ONE) == digits(1000000)

    def test_add_zero(self):
        assert add(digits(123), ZERO) == digits(123)
        assert add(ZERO, digits(123)) == digits(123)
        assert add(ZERO, ZERO) == ZERO

    def test_result_is_trimmed(self):
        assert add((1, 0, 0), (2,)) == (3,)

    def test_constants_not_mutated(self):
        """Test shared constants survive being used as operands"""
        add(ONE, ONE)
        add(ZERO, ONE)
        assert ZERO == (0,)
        assert ONE == (1,)

    def test_empty_operand_raises(self):
        with pytest.raises(EmptyOperand):
            add((), ONE)


class TestUnsignedSubtract:
    """Test magnitude subtraction"""

    def test_borrow_propagation(self):
        """Test 87654 - 780 = 86874"""
        assert subtract(digits(87654), digits(780)) == digits(86874)

    def test_borrow_across_zeros(self):
        assert subtract(digits(100000), ONE) == digits(99999)

    def test_equal_operands_give_zero(self):
        assert subtract(digits(4567), digits(4567)) == ZERO

    def test_subtract_zero(self):
        assert subtract(digits(4567), ZERO) == digits(4567)

    def test_result_is_trimmed(self):
        assert subtract(digits(1000), digits(999)) == ONE

    def test_smaller_minuend_raises(self):
        """Test a < b fails fast instead of underflowing"""
        with pytest.raises(InvalidSubtractionOrder):
            subtract(digits(780), digits(87654))
        with pytest.raises(InvalidSubtractionOrder):
            subtract(ZERO, ONE)


class TestSignedAdd:
    """Test signed addition across all sign combinations"""

    def test_positive_plus_positive(self):
        assert signed_add(True, digits(10), True, digits(5)) == (True, digits(15))

    def test_negative_plus_positive(self):
        assert signed_add(False, digits(10), True, digits(5)) == (False, digits(5))
        assert signed_add(False, digits(5), True, digits(10)) == (True, digits(5))

    def test_positive_plus_negative(self):
        assert signed_add(True, digits(10), False, digits(5)) == (True, digits(5))
        assert signed_add(True, digits(5), False, digits(10)) == (False, digits(5))

    def test_negative_plus_negative(self):
        """Test both negative adds magnitudes and stays negative"""
        assert signed_add(False, digits(10), False, digits(5)) == (False, digits(15))

    def test_cancellation_gives_positive_zero(self):
        assert signed_add(True, digits(9876543210), False, digits(9876543210)) == (True, ZERO)
        assert signed_add(False, digits(7), True, digits(7)) == (True, ZERO)

    def test_negative_zeros_give_positive_zero(self):
        assert signed_add(False, ZERO, False, ZERO) == (True, ZERO)

    def test_matches_int_addition(self):
        values = [-1001, -999, -10, -1, 0, 1, 9, 10, 999, 1001]
        for a, b in itertools.product(values, repeat=2):
            result = signed_add(a >= 0, digits(abs(a)), b >= 0, digits(abs(b)))
            assert as_int(result) == a + b


class TestSignedSubtract:
    """Test signed subtraction across all sign combinations"""

    def test_positive_minus_positive(self):
        assert signed_subtract(True, digits(10), True, digits(5)) == (True, digits(5))
        assert signed_subtract(True, digits(5), True, digits(10)) == (False, digits(5))

    def test_positive_minus_negative(self):
        """Test 9876543210 - (-9876543210) = 19753086420"""
        result = signed_subtract(True, digits(9876543210), False, digits(9876543210))
        assert result == (True, digits(19753086420))

    def test_negative_minus_positive(self):
        assert signed_subtract(False, digits(10), True, digits(5)) == (False, digits(15))

    def test_negative_minus_negative(self):
        assert signed_subtract(False, digits(10), False, digits(5)) == (False, digits(5))
        assert signed_subtract(False, digits(5), False, digits(10)) == (True, digits(5))

    def test_subtracting_zero_keeps_operand_and_sign(self):
        assert signed_subtract(False, digits(42), True, ZERO) == (False, digits(42))
        assert signed_subtract(True, digits(42), False, ZERO) == (True, digits(42))

    def test_zero_minus_value(self):
        assert signed_subtract(True, ZERO, True, digits(42)) == (False, digits(42))

    def test_equal_values_give_positive_zero(self):
        assert signed_subtract(False, digits(42), False, digits(42)) == (True, ZERO)
        assert signed_subtract(True, digits(42), True, digits(42)) == (True, ZERO)

    def test_subtract_add_duality(self):
        """Test (a - b) + b == a"""
        values = [-1001, -999, -10, -1, 0, 1, 9, 10, 999, 1001]
        for a, b in itertools.product(values, repeat=2):
            diff = signed_subtract(a >= 0, digits(abs(a)), b >= 0, digits(abs(b)))
            assert as_int(diff) == a - b
            back = signed_add(diff[0], diff[1], b >= 0, digits(abs(b)))
            assert as_int(back) == a
