"""Unit tests for claim-level orchestration"""

from dataclasses import replace
from datetime import timedelta
from decimal import Decimal

from claimcraft_engine.domain.claims import calculate_claim, calculate_financials
from claimcraft_engine.domain.models import Claim, InvoiceRecord, Party, PartyType, SolvencyStatus
from claimcraft_engine.domain.viability import CANNOT_PAY_RECOMMENDATION, VIABLE_RECOMMENDATION


def test_b2b_claim_end_to_end(b2b_claim, config, today):
    result = calculate_claim(b2b_claim, config, today=today)
    financials = result.financials

    assert financials.interest.days_overdue == 15
    assert financials.interest.total_interest == Decimal("12.58")
    assert financials.compensation == Decimal("70")
    assert financials.total_debt == Decimal("2482.58")
    assert financials.court_fee == Decimal("115")
    assert financials.grand_total == Decimal("2597.58")
    assert result.assessment.is_viable is True
    assert result.assessment.recommendation == VIABLE_RECOMMENDATION


def test_consumer_claim_has_no_compensation(individual, config, today):
    claim = Claim(
        claimant=individual,
        defendant=Party(type=PartyType.INDIVIDUAL, name="Sam Jones"),
        invoice=InvoiceRecord(
            invoice_number="R-1",
            total_amount=Decimal("500"),
            date_issued=today - timedelta(days=40),
            due_date=today - timedelta(days=10),
        ),
    )
    financials = calculate_financials(claim, config, today=today)

    assert financials.interest.total_interest == Decimal("1.10")
    assert financials.compensation == 0
    assert financials.total_debt == Decimal("501.10")
    assert financials.court_fee == Decimal("70")


def test_court_fee_is_charged_on_total_not_principal(business, config, today):
    """£290 alone is a £35 claim; with interest and compensation it crosses £300"""
    claim = Claim(
        claimant=business,
        defendant=Party(type=PartyType.BUSINESS, name="Widgets Ltd"),
        invoice=InvoiceRecord(
            invoice_number="INV-2",
            total_amount=Decimal("290"),
            date_issued=today - timedelta(days=60),
            due_date=today - timedelta(days=30),
        ),
    )
    financials = calculate_financials(claim, config, today=today)

    assert financials.interest.total_interest == Decimal("3.04")
    assert financials.compensation == Decimal("40")
    assert financials.total_debt == Decimal("333.04")
    assert financials.court_fee == Decimal("50")


def test_recalculation_reflects_changed_inputs(b2b_claim, config, today):
    first = calculate_claim(b2b_claim, config, today=today)
    dissolved = replace(
        b2b_claim,
        defendant=replace(b2b_claim.defendant, solvency_status=SolvencyStatus.DISSOLVED),
    )
    second = calculate_claim(dissolved, config, today=today)

    assert first.assessment.is_viable is True
    assert second.assessment.is_viable is False
    assert second.assessment.recommendation == CANNOT_PAY_RECOMMENDATION
    assert second.financials == first.financials


def test_later_calculation_date_accrues_more_interest(b2b_claim, config, today):
    now = calculate_financials(b2b_claim, config, today=today)
    later = calculate_financials(b2b_claim, config, today=today + timedelta(days=10))

    assert later.interest.days_overdue == now.interest.days_overdue + 10
    assert later.interest.total_interest > now.interest.total_interest
