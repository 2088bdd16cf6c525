"""Claim viability assessment against the Limitation Act, CPR Part 27 and solvency"""

from datetime import date
from decimal import Decimal
from typing import Callable, List, Tuple

from claimcraft_engine.domain.models import (
    AssessmentResult,
    CheckResult,
    Claim,
    InterestResult,
    PartyType,
    SolvencyStatus,
)
from claimcraft_engine.domain.parties import coerce_party_type
from claimcraft_engine.domain.statutory import StatutoryConfig
from claimcraft_engine.domain.court_fees import calculate_total_debt
from claimcraft_engine.utils.date_utils import days_between, resolve_due_date
from claimcraft_engine.utils.money import to_decimal, ZERO

DAYS_PER_YEAR_FOR_LIMITATION = Decimal("365.25")

VIABLE_RECOMMENDATION = "Claim appears legally viable for the Small Claims Track."
TOO_OLD_RECOMMENDATION = "Do not proceed. The claim is too old."
CANNOT_PAY_RECOMMENDATION = "Do not proceed. The defendant cannot pay."
SEEK_ADVICE_RECOMMENDATION = "Proceed with caution. Seek legal advice as this exceeds small claims limits."

# Evaluated top to bottom; first match wins. Order encodes severity.
RECOMMENDATION_RULES: List[Tuple[Callable[[CheckResult, CheckResult, CheckResult], bool], str]] = [
    (lambda limitation, value, solvency: limitation.passed and value.passed and solvency.passed, VIABLE_RECOMMENDATION),
    (lambda limitation, value, solvency: not limitation.passed, TOO_OLD_RECOMMENDATION),
    (lambda limitation, value, solvency: not solvency.passed, CANNOT_PAY_RECOMMENDATION),
    (lambda limitation, value, solvency: True, SEEK_ADVICE_RECOMMENDATION),
]


def check_limitation(claim: Claim, config: StatutoryConfig, today: date | None = None) -> CheckResult:
    """
    Limitation Act 1980 s.5: six years from the date the debt fell due.

    Runs from the effective due date (issue date + default terms when no due
    date is recorded), not the issue date.
    """
    period = config.limitation_period_years
    limitation_start = resolve_due_date(
        claim.invoice.date_issued,
        claim.invoice.due_date,
        config.default_payment_terms_days,
    )
    if limitation_start is None:
        return CheckResult(
            passed=False,
            message="Invoice date is missing or invalid, so the limitation period cannot be confirmed.",
        )

    elapsed_years = Decimal(days_between(limitation_start, today or date.today())) / DAYS_PER_YEAR_FOR_LIMITATION

    if elapsed_years < period:
        return CheckResult(
            passed=True,
            message=f"Within the {period}-year statutory limitation period (Limitation Act 1980).",
        )
    return CheckResult(
        passed=False,
        message=(
            f"Claim is statute-barred (older than {period} years from due date). "
            "You likely cannot recover this debt."
        ),
    )


def check_value(
    claim: Claim,
    interest: InterestResult,
    compensation: Decimal,
    config: StatutoryConfig,
) -> CheckResult:
    """CPR Part 27: total claimed must not exceed the small claims ceiling"""
    principal = to_decimal(claim.invoice.total_amount) or ZERO
    total_value = calculate_total_debt(principal, interest.total_interest, compensation)
    ceiling = config.small_claims_ceiling

    if total_value <= ceiling:
        return CheckResult(
            passed=True,
            message=(
                f"Claim value (£{total_value:,.2f}) is within the Small Claims Track limit "
                f"(£{ceiling:,.0f})."
            ),
        )
    return CheckResult(
        passed=False,
        message=(
            f"Claim value (£{total_value:,.2f}) exceeds £{ceiling:,.0f}. This requires Fast Track "
            "or Multi-Track (higher legal risk/costs)."
        ),
    )


def check_solvency(claim: Claim) -> CheckResult:
    """Companies House status; only limited companies can be insolvent or dissolved here"""
    defendant = claim.defendant
    if coerce_party_type(defendant.type) == PartyType.BUSINESS:
        if defendant.solvency_status == SolvencyStatus.INSOLVENT:
            return CheckResult(
                passed=False,
                message=(
                    "Warning: Defendant company is Insolvent. Recovery is highly unlikely "
                    "even if you win judgment."
                ),
            )
        if defendant.solvency_status == SolvencyStatus.DISSOLVED:
            return CheckResult(
                passed=False,
                message=(
                    "Defendant company is Dissolved. You cannot pursue legal action "
                    "against a non-existent entity."
                ),
            )

    return CheckResult(passed=True, message="Defendant appears to be an active entity.")


def choose_recommendation(limitation: CheckResult, value: CheckResult, solvency: CheckResult) -> str:
    for condition, recommendation in RECOMMENDATION_RULES:
        if condition(limitation, value, solvency):
            return recommendation
    return SEEK_ADVICE_RECOMMENDATION


def assess_claim_viability(
    claim: Claim,
    interest: InterestResult,
    compensation: Decimal,
    config: StatutoryConfig,
    today: date | None = None,
) -> AssessmentResult:
    """
    Run all three checks and combine them.

    Every check always runs; is_viable is the AND of the three. The
    recommendation comes from RECOMMENDATION_RULES:
    viable, then limitation failure, then solvency failure, then value failure.
    """
    limitation = check_limitation(claim, config, today)
    value = check_value(claim, interest, compensation, config)
    solvency = check_solvency(claim)

    return AssessmentResult(
        is_viable=limitation.passed and value.passed and solvency.passed,
        limitation_check=limitation,
        value_check=value,
        solvency_check=solvency,
        recommendation=choose_recommendation(limitation, value, solvency),
    )
