"""Tests for spendlog.domain.money pure functions."""

from decimal import Decimal

from spendlog.domain.models import Money
from spendlog.domain.money import format_money_display, parse_money, to_minor_units


class TestToMinorUnits:
    """Tests for to_minor_units."""

    def test_whole_amount(self) -> None:
        """Should scale whole amounts by 100."""
        assert to_minor_units(Decimal("100")) == 10000

    def test_rounds_half_up(self) -> None:
        """Should round to the nearest cent, halves away from zero."""
        assert to_minor_units(Decimal("0.125")) == 13
        assert to_minor_units(Decimal("0.124")) == 12

    def test_accepts_strings_and_ints(self) -> None:
        """Should accept plain strings and ints."""
        assert to_minor_units("12.34") == 1234
        assert to_minor_units(7) == 700

    def test_negative_amount(self) -> None:
        """Should keep the sign of negative amounts."""
        assert to_minor_units(Decimal("-5.50")) == -550


class TestParseMoney:
    """Tests for parse_money."""

    def test_parses_plain_number(self) -> None:
        """Should parse a plain decimal number."""
        amount, error = parse_money("45.50")
        assert amount == Money(4550)
        assert error is None

    def test_strips_symbol_and_separators(self) -> None:
        """Should ignore a leading currency symbol and thousands separators."""
        amount, error = parse_money("  Rs. 1,234.5 ")
        assert amount == Money(123450)
        assert error is None

    def test_custom_symbol(self) -> None:
        """Should strip a configured currency symbol."""
        amount, error = parse_money("$3", symbol="$")
        assert amount == Money(300)
        assert error is None

    def test_accepts_negative(self) -> None:
        """Should accept negative amounts without complaint."""
        amount, error = parse_money("-20")
        assert amount == Money(-2000)
        assert error is None

    def test_rejects_text(self) -> None:
        """Should return an error for non-numeric input."""
        amount, error = parse_money("lots")
        assert amount is None
        assert error is not None
        assert "not a number" in error

    def test_rejects_empty(self) -> None:
        """Should return an error for empty input."""
        amount, error = parse_money("   ")
        assert amount is None
        assert error == "Please enter a number"

    def test_rejects_amount_beyond_precision(self) -> None:
        """Should return an error instead of raising for huge amounts."""
        for raw in ["1e30", "1e26", "-1e40"]:
            amount, error = parse_money(raw)
            assert amount is None
            assert error == f"'{raw}' is too large"

    def test_largest_representable_amount(self) -> None:
        """Should still accept large amounts within precision."""
        amount, error = parse_money("1e20")
        assert amount == Money(10**22)
        assert error is None

    def test_rejects_non_finite(self) -> None:
        """Should reject NaN and infinity."""
        for raw in ["NaN", "Infinity", "-inf"]:
            amount, error = parse_money(raw)
            assert amount is None
            assert error is not None


class TestFormatMoneyDisplay:
    """Tests for format_money_display."""

    def test_two_decimals(self) -> None:
        """Should always show two decimal places."""
        assert format_money_display(Money(15000)) == "Rs. 150.00"

    def test_thousands_separator(self) -> None:
        """Should group thousands."""
        assert format_money_display(Money(123456789)) == "Rs. 1,234,567.89"

    def test_negative(self) -> None:
        """Should put the minus sign before the symbol."""
        assert format_money_display(Money(-500)) == "-Rs. 5.00"

    def test_custom_symbol(self) -> None:
        """Should use the given currency symbol."""
        assert format_money_display(Money(45), symbol="£") == "£ 0.45"
