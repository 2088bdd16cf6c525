"""Currency helpers built on Decimal"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any

PENNY = Decimal("0.01")
RATE_PRECISION = Decimal("0.0001")
ZERO = Decimal("0")

# Largest magnitude accepted as a money amount. Anything bigger cannot be a
# real debt and would overflow pence/4dp quantization at default precision.
MAX_AMOUNT = Decimal("1000000000000")


def parse_decimal(value: Any) -> Decimal | None:
    """
    Parse a raw numeric value (int, float, Decimal or numeric string).

    Returns None for booleans, non-numeric strings, NaN and infinities.
    Strings may carry a leading currency symbol and thousands separators
    ("£1,250.00"). No range check: use to_decimal for money amounts.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        cleaned = value.strip().lstrip("£$€").replace(",", "")
        if not cleaned:
            return None
        try:
            amount = Decimal(cleaned)
        except InvalidOperation:
            return None
    else:
        return None

    if not amount.is_finite():
        return None
    return amount


def to_decimal(value: Any) -> Decimal | None:
    """Parse a money amount; None if unparseable or beyond +/- MAX_AMOUNT"""
    amount = parse_decimal(value)
    if amount is None or abs(amount) > MAX_AMOUNT:
        return None
    return amount


def round_money(amount: Decimal) -> Decimal:
    """Round to pence, half up"""
    return amount.quantize(PENNY, rounding=ROUND_HALF_UP)


def round_rate(amount: Decimal) -> Decimal:
    """Round a per-day rate to 4 decimal places, half up"""
    return amount.quantize(RATE_PRECISION, rounding=ROUND_HALF_UP)


def format_currency(amount: Any) -> str:
    """Format as a 2dp string; anything non-numeric renders as 0.00"""
    value = to_decimal(amount)
    if value is None:
        return "0.00"
    return f"{round_money(value):.2f}"


def currency_symbol(currency: str | None) -> str:
    """Symbol for an ISO currency code, defaulting to sterling"""
    symbols = {
        "GBP": "£",
        "USD": "$",
        "EUR": "€",
        "AUD": "A$",
        "CAD": "C$",
    }
    return symbols.get((currency or "GBP").upper(), "£")
