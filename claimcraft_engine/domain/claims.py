"""Claim-level orchestration: recompute every derived figure from scratch"""

from datetime import date

from claimcraft_engine.domain.compensation import calculate_compensation
from claimcraft_engine.domain.court_fees import (
    calculate_court_fee,
    calculate_grand_total,
    calculate_total_debt,
)
from claimcraft_engine.domain.interest import calculate_interest
from claimcraft_engine.domain.models import Claim, ClaimCalculation, ClaimFinancials
from claimcraft_engine.domain.statutory import StatutoryConfig
from claimcraft_engine.domain.viability import assess_claim_viability
from claimcraft_engine.utils.money import ZERO, to_decimal


def calculate_financials(claim: Claim, config: StatutoryConfig, today: date | None = None) -> ClaimFinancials:
    """
    Interest -> compensation -> court fee.

    The court fee is charged on the total debt (principal + interest +
    compensation), never on the principal alone.
    """
    invoice = claim.invoice
    principal = to_decimal(invoice.total_amount) or ZERO

    interest = calculate_interest(
        principal,
        invoice.date_issued,
        invoice.due_date,
        claim.claimant.type,
        claim.defendant.type,
        config,
        today=today,
    )
    compensation = calculate_compensation(principal, claim.claimant.type, claim.defendant.type)
    total_debt = calculate_total_debt(principal, interest.total_interest, compensation)
    court_fee = calculate_court_fee(total_debt)

    return ClaimFinancials(
        interest=interest,
        compensation=compensation,
        court_fee=court_fee,
        total_debt=total_debt,
        grand_total=calculate_grand_total(principal, interest.total_interest, compensation, court_fee),
    )


def calculate_claim(claim: Claim, config: StatutoryConfig, today: date | None = None) -> ClaimCalculation:
    """
    Main entry point: financials plus a viability snapshot.

    Call again whenever any party, invoice or solvency field changes; nothing
    is cached.
    """
    today = today or date.today()
    financials = calculate_financials(claim, config, today)
    assessment = assess_claim_viability(
        claim,
        financials.interest,
        financials.compensation,
        config,
        today=today,
    )
    return ClaimCalculation(financials=financials, assessment=assessment)
