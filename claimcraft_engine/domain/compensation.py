"""Fixed-sum compensation under the Late Payment of Commercial Debts (Interest) Act 1998"""

from decimal import Decimal
from typing import Any

from claimcraft_engine.domain.parties import PartyTypeLike, is_b2b
from claimcraft_engine.utils.money import ZERO, format_currency, to_decimal

# (exclusive upper bound, compensation); the final band is open-ended
COMPENSATION_BANDS = (
    (Decimal("1000"), Decimal("40")),
    (Decimal("10000"), Decimal("70")),
)
TOP_BAND_COMPENSATION = Decimal("100")


def calculate_compensation(
    principal: Any,
    claimant_type: PartyTypeLike,
    defendant_type: PartyTypeLike,
) -> Decimal:
    """
    Map the debt to the statutory compensation band.

    Bands (s.5A):
    - under £1,000:          £40
    - £1,000 to £9,999.99:   £70
    - £10,000 and above:     £100

    Consumer claims (either party an individual) get nothing.
    """
    if not is_b2b(claimant_type, defendant_type):
        return ZERO

    amount = to_decimal(principal)
    if amount is None or amount < 0:
        return ZERO

    for upper, compensation in COMPENSATION_BANDS:
        if amount < upper:
            return compensation
    return TOP_BAND_COMPENSATION


def compensation_clause(b2b: bool, compensation: Decimal) -> str:
    """Particulars-of-claim wording for the compensation head; empty when not claimable"""
    if not b2b or compensation <= 0:
        return ""
    return (
        f"The Claimant is entitled to statutory compensation of £{format_currency(compensation)} "
        "pursuant to section 5A of the Late Payment of Commercial Debts (Interest) Act 1998."
    )
