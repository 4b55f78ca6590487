"""Tests for floating-point helpers."""

import math

import pytest
from endinero.utils.floats import (
    DOUBLE,
    SINGLE,
    WIDTHS,
    fraction_digits,
    non_finite_literal,
    to_single,
    truncated_magnitude,
)


class TestFloatWidth:
    """Tests for the DOUBLE and SINGLE width descriptors."""

    def test_safe_digits(self):
        """Test safe precision per width."""
        assert DOUBLE.safe_digits == 17
        assert SINGLE.safe_digits == 7

    def test_widths_registry(self):
        """Test lookup by name."""
        assert WIDTHS["double"] is DOUBLE
        assert WIDTHS["single"] is SINGLE

    def test_double_narrow_is_identity(self):
        """Test that narrowing to double keeps the value."""
        assert DOUBLE.narrow(0.1) == 0.1

    def test_single_narrow_rounds(self):
        """Test that narrowing to single rounds the value."""
        assert SINGLE.narrow(0.1) != 0.1
        assert SINGLE.narrow(0.5) == 0.5


class TestToSingle:
    """Tests for to_single function."""

    def test_exact_values_unchanged(self):
        """Test values representable as singles."""
        assert to_single(1234.125) == 1234.125
        assert to_single(-0.0) == 0.0
        assert math.copysign(1.0, to_single(-0.0)) == -1.0

    def test_rounds_to_nearest_single(self):
        """Test rounding of a value with too many significant bits."""
        assert to_single(10.111) == 10.11100006103515625

    def test_overflow_becomes_infinity(self):
        """Test that out-of-range values become signed infinity."""
        assert to_single(1e39) == math.inf
        assert to_single(-1e39) == -math.inf

    def test_nan_stays_nan(self):
        """Test that NaN passes through."""
        assert math.isnan(to_single(float("nan")))


class TestNonFiniteLiteral:
    """Tests for non_finite_literal function."""

    @pytest.mark.parametrize("value,expected", [
        (float("nan"), "NaN"),
        (float("inf"), "inf"),
        (float("-inf"), "-inf"),
        (0.0, None),
        (-1e300, None),
    ])
    def test_literals(self, value: float, expected):
        """Test literal per value."""
        assert non_finite_literal(value) == expected


class TestTruncatedMagnitude:
    """Tests for truncated_magnitude function."""

    def test_truncates_toward_zero(self):
        """Test that the fraction is dropped."""
        assert truncated_magnitude(7.99) == 7
        assert truncated_magnitude(-7.99) == 7

    def test_saturates(self):
        """Test saturation at the width's integer range."""
        assert truncated_magnitude(1e30) == 2**63 - 1
        assert truncated_magnitude(5e9, SINGLE) == 2**31 - 1

    def test_in_range_not_saturated(self):
        """Test that values in range are untouched."""
        assert truncated_magnitude(2147483647.0, SINGLE) == 2147483647


class TestFractionDigits:
    """Tests for fraction_digits function."""

    def test_fixed_width_double(self):
        """Test that exactly 17 digits are produced for doubles."""
        assert fraction_digits(0.5) == "50000000000000000"
        assert fraction_digits(1234567.456789) == "45678899995982647"

    def test_fixed_width_single(self):
        """Test that exactly 7 digits are produced for singles."""
        assert fraction_digits(to_single(10.111), SINGLE) == "1110001"
        assert fraction_digits(to_single(0.12345678), SINGLE) == "1234568"

    def test_ignores_sign(self):
        """Test that digits come from the magnitude."""
        assert fraction_digits(-0.25) == fraction_digits(0.25)

    def test_large_values_keep_positions(self):
        """Test that large integer parts do not shift digit positions."""
        assert fraction_digits(1e20) == "0" * 17
