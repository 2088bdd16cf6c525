"""Statutory interest on late payment"""

import logging
from datetime import date
from decimal import Decimal
from typing import Any

from claimcraft_engine.domain.models import InterestResult
from claimcraft_engine.domain.parties import PartyTypeLike, is_b2b
from claimcraft_engine.domain.statutory import StatutoryConfig
from claimcraft_engine.utils.date_utils import days_between, resolve_due_date
from claimcraft_engine.utils.money import ZERO, round_money, round_rate, to_decimal

logger = logging.getLogger(__name__)


def annual_interest_rate(
    claimant_type: PartyTypeLike,
    defendant_type: PartyTypeLike,
    config: StatutoryConfig,
) -> Decimal:
    """
    Annual rate (percent) for the applicable regime.

    - B2B: Late Payment of Commercial Debts (Interest) Act 1998, base + 8%
    - Otherwise: County Courts Act 1984 s.69, flat 8%
    """
    if is_b2b(claimant_type, defendant_type):
        return config.late_payment_rate_percent
    return config.county_court_rate_percent


def calculate_interest(
    principal: Any,
    date_issued: Any,
    due_date: Any,
    claimant_type: PartyTypeLike,
    defendant_type: PartyTypeLike,
    config: StatutoryConfig,
    today: date | None = None,
) -> InterestResult:
    """
    Simple daily interest from the date payment became due.

    Requirements:
    - Due date falls back to issue date + default payment terms
    - days_overdue = max(0, today - due date)
    - daily_rate = principal * rate / divisor, rounded to 4dp
    - total_interest = unrounded daily rate * days, rounded to 2dp

    Bad input (missing/invalid issue date, non-positive or non-numeric
    principal) yields an all-zero result rather than an error.

    Example:
        £2400 B2B at 12.75%, 15 days late
        daily = 2400 * 0.1275 / 365 = 0.838356... -> 0.8384
        total = 0.838356... * 15 = 12.575... -> 12.58
    """
    b2b = is_b2b(claimant_type, defendant_type)
    rate = annual_interest_rate(claimant_type, defendant_type, config)
    zero = InterestResult(
        days_overdue=0,
        daily_rate=ZERO,
        total_interest=ZERO,
        annual_rate_percent=rate,
        is_b2b=b2b,
    )

    amount = to_decimal(principal)
    if amount is None or amount <= 0:
        logger.debug("Interest skipped: unusable principal %r", principal)
        return zero

    payment_due = resolve_due_date(date_issued, due_date, config.default_payment_terms_days)
    if payment_due is None:
        logger.debug("Interest skipped: unusable issue date %r", date_issued)
        return zero

    days_overdue = max(0, days_between(payment_due, today or date.today()))
    if days_overdue == 0:
        return zero

    # Both figures come from the full-precision daily rate
    daily_rate = amount * rate / Decimal(100) / Decimal(config.days_per_year_divisor)
    total_interest = daily_rate * days_overdue

    return InterestResult(
        days_overdue=days_overdue,
        daily_rate=round_rate(daily_rate),
        total_interest=round_money(total_interest),
        annual_rate_percent=rate,
        is_b2b=b2b,
    )
