"""Tests for money helpers"""
import math
from decimal import Decimal

import pytest

from shopcart.services.money import (
    add,
    format_currency_input,
    format_money,
    from_minor_units,
    multiply,
    parse_currency_display,
    round_money,
    subtract,
    to_decimal,
)


class TestFormatCurrencyInput:
    """Live formatting of the price field."""

    @pytest.mark.parametrize("raw, expected", [
        ("123456", "R$ 1.234,56"),
        ("500", "R$ 5,00"),
        ("1", "R$ 0,01"),
        ("12", "R$ 0,12"),
        ("0", "R$ 0,00"),
        ("", "R$ 0,00"),
        ("100000000", "R$ 1.000.000,00"),
    ])
    def test_digits_are_cents(self, raw, expected):
        """Test digits are read as minor units."""
        assert format_currency_input(raw) == expected

    def test_strips_non_digits(self):
        """Test symbols and separators from a previous render are ignored."""
        assert format_currency_input("R$ 1.234,567") == "R$ 12.345,67"
        assert format_currency_input("abc12x3") == "R$ 1,23"

    def test_digits_beyond_decimal_precision(self):
        """Test long digit strings keep every digit."""
        assert format_currency_input(str(10 ** 30)) == "R$ 10" + ".000" * 9 + ",00"
        assert format_currency_input("9" * 31) == "R$ 99" + ".999" * 9 + ",99"

    def test_digit_string_longer_than_int_limit(self):
        """Test field text too long for int() still formats."""
        formatted = format_currency_input("1" + "0" * 5000)

        assert formatted.startswith("R$ 1.000.")
        assert formatted.endswith(",00")

    def test_none_is_zero(self):
        """Test missing text renders zero."""
        assert format_currency_input(None) == "R$ 0,00"


class TestParseCurrencyDisplay:
    """Parsing of formatted prices."""

    def test_parse_formatted(self):
        """Test the pt-BR display form parses to a number."""
        assert parse_currency_display("R$ 1.234,56") == 1234.56
        assert parse_currency_display("R$ 5,00") == 5.0

    def test_parse_without_decimals(self):
        """Test plain digits parse as whole units."""
        assert parse_currency_display("42") == 42.0

    @pytest.mark.parametrize("text", ["", "R$ ", "abc", "1,2,3", None])
    def test_invalid_is_nan(self, text):
        """Test empty or malformed input yields NaN."""
        assert math.isnan(parse_currency_display(text))

    @pytest.mark.parametrize("cents", [0, 1, 5, 99, 100, 500, 1999, 123456, 987654321, 10 ** 26, 10 ** 28, 10 ** 30, 10 ** 30 - 1])
    def test_round_trip(self, cents):
        """Test parse(format(c)) == c / 100."""
        assert parse_currency_display(format_currency_input(str(cents))) == pytest.approx(cents / 100)


class TestMoneyHelpers:
    """Decimal helpers."""

    def test_to_decimal_from_float(self):
        """Test floats convert through their string form."""
        assert to_decimal(0.1) == Decimal("0.1")

    def test_to_decimal_invalid(self):
        """Test invalid input becomes zero."""
        assert to_decimal(None) == Decimal("0")
        assert to_decimal("not a number") == Decimal("0")

    def test_from_minor_units(self):
        assert from_minor_units(10050) == Decimal("100.50")

    def test_round_money(self):
        """Test rounding half up to cents."""
        assert round_money("2.345") == Decimal("2.35")

    def test_format_money(self):
        """Test display form for amounts."""
        assert format_money(Decimal("15")) == "R$ 15,00"
        assert format_money(Decimal("1234567.8")) == "R$ 1.234.567,80"
        assert format_money(0) == "R$ 0,00"

    def test_format_money_large_decimal(self):
        assert format_money(Decimal("1E+30")) == "R$ 1" + ".000" * 10 + ",00"

    def test_arithmetic_is_exact(self):
        """Test sums past 28 digits do not round."""
        big = Decimal("9" * 40)

        assert subtract(add(big, Decimal("0.01")), big) == Decimal("0.01")
        assert multiply(big, 3) == Decimal("2" + "9" * 39 + "7")
