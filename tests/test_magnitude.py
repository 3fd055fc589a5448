"""
Test suite for magnitude module

Tests digit storage order, canonical trimming, and native int conversion.
"""

import pytest

from large_numbers.errors import EmptyOperand, InvalidDigit
from large_numbers.magnitude import (
    ONE, ZERO, from_native, is_zero, render, to_native, trim, validate
)


class TestTrim:
    """Test canonical form"""

    def test_trim_drops_most_significant_zeros(self):
        """Test that "000123" stored reversed trims to 123"""
        assert trim((3, 2, 1, 0, 0, 0)) == (3, 2, 1)

    def test_trim_keeps_single_zero(self):
        """Test zero is always the single digit (0,)"""
        assert trim((0, 0, 0)) == ZERO
        assert trim((0,)) == ZERO

    def test_trim_keeps_interior_and_low_zeros(self):
        """Test only most-significant zeros are removed"""
        assert trim((0, 0, 1)) == (0, 0, 1)
        assert trim((0, 5, 0, 7, 0)) == (0, 5, 0, 7)

    def test_trim_is_idempotent(self):
        """Test trim(trim(m)) == trim(m)"""
        samples = [(0,), (1,), (0, 0, 0), (9, 0, 0), (1, 2, 3), (0, 1, 0, 0)]
        for digits in samples:
            assert trim(trim(digits)) == trim(digits)

    def test_trim_empty_raises(self):
        """Test an empty sequence is rejected"""
        with pytest.raises(EmptyOperand):
            trim(())

    def test_trim_returns_tuple_copy(self):
        """Test trimming a list does not modify the list"""
        digits = [1, 0, 0]
        assert trim(digits) == (1,)
        assert digits == [1, 0, 0]


class TestValidate:
    """Test digit validation"""

    def test_valid_digits(self):
        assert validate([4, 3, 2, 1]) == (4, 3, 2, 1)

    def test_empty_rejected(self):
        with pytest.raises(EmptyOperand):
            validate([])

    def test_out_of_range_rejected(self):
        """Test entries outside 0-9 are rejected"""
        with pytest.raises(InvalidDigit):
            validate([1, 10])
        with pytest.raises(InvalidDigit):
            validate([-1])

    def test_non_int_rejected(self):
        with pytest.raises(InvalidDigit):
            validate(["1"])
        with pytest.raises(InvalidDigit):
            validate([True])


class TestNativeConversion:
    """Test int <-> digit tuple conversion"""

    def test_digits_are_least_significant_first(self):
        assert from_native(1234) == (4, 3, 2, 1)

    def test_zero(self):
        assert from_native(0) == ZERO
        assert to_native(ZERO) == 0

    def test_round_trip_large_value(self):
        value = 2 ** 200
        assert to_native(from_native(value)) == value

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            from_native(-1)


class TestHelpers:
    """Test small magnitude helpers"""

    def test_constants(self):
        assert ZERO == (0,)
        assert ONE == (1,)
        assert isinstance(ZERO, tuple)

    def test_is_zero(self):
        assert is_zero(ZERO)
        assert is_zero((0, 0))
        assert not is_zero(ONE)

    def test_render_most_significant_first(self):
        assert render((4, 3, 2, 1)) == "1234"
        assert render(ZERO) == "0"
