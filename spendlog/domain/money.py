"""Pure functions for converting and displaying money amounts.

This module contains the functional core for money handling:
- No I/O operations
- No side effects
- Easy to test

All monetary amounts are in minor units (Money type).
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from spendlog.domain.models import Money

DEFAULT_CURRENCY_SYMBOL = "Rs."

_TWO_PLACES = Decimal("0.01")


def to_minor_units(value: Decimal | int | str) -> Money:
    """Convert a decimal currency value to minor units.

    Args:
        value: Amount in major units (e.g., Decimal("12.345")).

    Returns:
        Amount in minor units, rounded half-up to the nearest cent.

    Raises:
        decimal.InvalidOperation: If value is not a valid number.
    """
    quantized = Decimal(value).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
    return Money(int(quantized * 100))


def parse_money(raw: str, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> tuple[Money | None, str | None]:
    """Parse a user-entered amount.

    Accepts an optional leading currency symbol and thousands separators.
    Negative amounts are accepted as-is.

    Args:
        raw: Text entered by the user.
        symbol: Currency symbol that may prefix the amount.

    Returns:
        Tuple of (amount, error_message).
        - amount: Parsed amount in minor units, or None on error
        - error_message: None if successful, error string otherwise
    """
    text = raw.strip()
    if symbol and text.startswith(symbol):
        text = text[len(symbol) :].strip()
    text = text.replace(",", "")

    if not text:
        return None, "Please enter a number"

    try:
        value = Decimal(text)
    except InvalidOperation:
        return None, f"'{raw.strip()}' is not a number"

    if not value.is_finite():
        return None, f"'{raw.strip()}' is not a number"

    # quantize fails once the result exceeds the context precision
    try:
        return to_minor_units(value), None
    except InvalidOperation:
        return None, f"'{raw.strip()}' is too large"


def format_money_display(amount: Money, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format money amount for display.

    Args:
        amount: Amount in minor units.
        symbol: Currency symbol to prefix.

    Returns:
        Formatted string (e.g., "Rs. 1,234.50" or "-Rs. 5.00").
    """
    major = Decimal(abs(amount)) / 100
    formatted = f"{symbol} {major:,.2f}"

    if amount < 0:
        return f"-{formatted}"
    return formatted
