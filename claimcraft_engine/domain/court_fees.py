"""Court issue fees (Civil Proceedings Fees Order, money claims)

This is the only copy of the fee schedule. Anything that needs a fee calls
calculate_court_fee.
"""

from decimal import Decimal
from typing import Any

from claimcraft_engine.utils.money import ZERO, parse_decimal, round_money

# (inclusive upper bound, fee)
FIXED_FEE_BANDS = (
    (Decimal("300"), Decimal("35")),
    (Decimal("500"), Decimal("50")),
    (Decimal("1000"), Decimal("70")),
    (Decimal("1500"), Decimal("80")),
    (Decimal("3000"), Decimal("115")),
    (Decimal("5000"), Decimal("205")),
    (Decimal("10000"), Decimal("455")),
)
PERCENTAGE_BAND_LIMIT = Decimal("200000")
PERCENTAGE_FEE_RATE = Decimal("0.05")
MAXIMUM_FEE = Decimal("10000")


def calculate_court_fee(total_claim_value: Any) -> Decimal:
    """
    Issue fee for a claim of the given total value.

    The value must be the total claimed (principal + interest + compensation),
    not the principal alone.

    Bands (upper bound inclusive):
    - <= £300: £35, <= £500: £50, <= £1,000: £70, <= £1,500: £80
    - <= £3,000: £115, <= £5,000: £205, <= £10,000: £455
    - <= £200,000: 5% of value, capped at £10,000
    - above £200,000: £10,000

    Negative values are clamped to zero, so they fall in the first band.
    A non-numeric value has no fee.
    """
    amount = parse_decimal(total_claim_value)
    if amount is None:
        return ZERO
    amount = max(amount, ZERO)

    for upper, fee in FIXED_FEE_BANDS:
        if amount <= upper:
            return fee

    if amount <= PERCENTAGE_BAND_LIMIT:
        return min(round_money(amount * PERCENTAGE_FEE_RATE), MAXIMUM_FEE)

    return MAXIMUM_FEE


def court_fee_band(total_claim_value: Any) -> str:
    """Label for the band a value falls in, used for metrics"""
    amount = parse_decimal(total_claim_value)
    if amount is None:
        return "none"
    amount = max(amount, ZERO)

    for upper, _ in FIXED_FEE_BANDS:
        if amount <= upper:
            return f"<=£{upper:,.0f}"

    if amount <= PERCENTAGE_BAND_LIMIT:
        return "5%"
    return "max"


def calculate_total_debt(principal: Decimal, interest: Decimal, compensation: Decimal) -> Decimal:
    """Sum claimed before the court fee"""
    return principal + interest + compensation


def calculate_grand_total(
    principal: Decimal,
    interest: Decimal,
    compensation: Decimal,
    court_fee: Decimal,
) -> Decimal:
    return calculate_total_debt(principal, interest, compensation) + court_fee
