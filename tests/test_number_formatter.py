"""Unit tests for display formatting and number parsing."""

import math

import pytest

from number_formatter import (
    ERROR_TOKEN,
    MAX_DISPLAY_LENGTH,
    format_number,
    number_to_string,
    parse_float,
    to_exponential,
    to_fixed,
)


class TestParseFloat:
    """Tests for parse_float prefix parsing."""

    @pytest.mark.parametrize("text,expected", [
        ("42", 42.0),
        ("-5", -5.0),
        ("0.", 0.0),
        ("-.5", -0.5),
        ("12abc", 12.0),
        ("1e", 1.0),
        ("1.2345678901e+21", 1.2345678901e21),
    ])
    def test_numeric_prefix(self, text, expected):
        """The longest numeric prefix is parsed."""
        assert parse_float(text) == expected

    def test_infinity(self):
        """Infinity literals parse to infinite floats."""
        assert parse_float("Infinity") == math.inf
        assert parse_float("-Infinity") == -math.inf

    @pytest.mark.parametrize("text", ["", "Error", "Error: division by zero", "-", "."])
    def test_not_a_number(self, text):
        """Text without a numeric prefix parses to NaN."""
        assert math.isnan(parse_float(text))


class TestNumberToString:
    """Tests for browser-style number rendering."""

    @pytest.mark.parametrize("value,expected", [
        (10.0, "10"),
        (-2.5, "-2.5"),
        (123.456, "123.456"),
        (0.1 + 0.2, "0.30000000000000004"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (1e-6, "0.000001"),
        (1e-7, "1e-7"),
        (1.5e-7, "1.5e-7"),
        (-0.0, "0"),
    ])
    def test_rendering(self, value, expected):
        assert number_to_string(value) == expected

    def test_special_values(self):
        assert number_to_string(math.nan) == "NaN"
        assert number_to_string(math.inf) == "Infinity"
        assert number_to_string(-math.inf) == "-Infinity"


class TestFixedAndExponential:
    """Tests for fixed-point and exponential rendering."""

    def test_fixed_rounds_half_up(self):
        """Exact ties round away from zero."""
        assert to_fixed(2.5, 0) == "3"
        assert to_fixed(0.5, 0) == "1"

    def test_fixed_uses_exact_binary_value(self):
        """1.005 is slightly below 1.005 in binary."""
        assert to_fixed(1.005, 2) == "1.00"

    def test_fixed_pads_decimals(self):
        assert to_fixed(1.5, 3) == "1.500"

    def test_fixed_large_values_fall_back(self):
        assert to_fixed(1e21, 2) == "1e+21"

    def test_fixed_rejects_bad_digits(self):
        with pytest.raises(ValueError):
            to_fixed(1.0, -1)

    @pytest.mark.parametrize("value,precision,expected", [
        (123456.0, 2, "1.23e+5"),
        (0.0, 2, "0.00e+0"),
        (-0.00015, 1, "-1.5e-4"),
        (9.99, 0, "1e+1"),
    ])
    def test_exponential(self, value, precision, expected):
        assert to_exponential(value, precision) == expected


class TestFormatNumber:
    """Tests for format_number display rules."""

    def test_short_values_unchanged(self):
        assert format_number(10.0) == "10"
        assert format_number(0.25) == "0.25"
        assert format_number("5") == "5"

    def test_nan_is_error_token(self):
        assert format_number(math.nan) == ERROR_TOKEN

    def test_infinity_is_kept(self):
        assert format_number(1e300 * 1e10) == "Infinity"

    def test_long_decimals_are_rounded(self):
        """Decimal digits are cut to fit the display."""
        assert format_number(1 / 3) == "0.33333333333333"
        assert format_number(2 / 3) == "0.66666666666667"
        assert format_number(0.1 + 0.2) == "0.30000000000000"

    def test_integer_part_limits_decimals(self):
        assert format_number(123456789012345.67) == "123456789012346"

    def test_small_exponential_with_decimals_uses_fixed(self):
        assert format_number(1.2345678901234567e-7) == "0.00000012345679"

    def test_long_integers_switch_to_exponential(self):
        assert format_number(12345678901234567890.0) == "1.2345678901e+19"

    def test_negative_exponential_fits(self):
        """The mantissa shrinks when the sign would overflow the display."""
        assert format_number(-1234567890123456.0) == "-1.234567890e+15"

    def test_three_digit_exponent_fits(self):
        result = format_number(-1.2345678901234e100)
        assert len(result) <= MAX_DISPLAY_LENGTH
        assert result.endswith("e+100")

    @pytest.mark.parametrize("value", [
        1 / 3,
        2 / 3,
        0.1 + 0.2,
        1e21,
        1e-7,
        123456.789,
        12345678901234567890.0,
        -1234567890123456.0,
        1.2345678901234567e-7,
        -1.2345678901234e100,
        99.99999999999999,
        math.sqrt(2),
    ])
    def test_idempotent_and_bounded(self, value):
        once = format_number(value)
        assert format_number(once) == once
        assert len(once) <= MAX_DISPLAY_LENGTH
