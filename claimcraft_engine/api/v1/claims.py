"""POST /v1/claims/calculate - interest, compensation, court fee and viability"""

import logging
import time
from typing import List, Tuple

from fastapi import APIRouter, Depends, HTTPException, Request

from claimcraft_engine.api.dependencies import get_request_id, get_statutory_config
from claimcraft_engine.api.v1.schemas import (
    AssessmentSchema,
    CheckSchema,
    ClaimCalculationRequest,
    ClaimCalculationResponse,
    InterestSchema,
    ValidationErrorResponse,
)
from claimcraft_engine.domain.claims import calculate_claim
from claimcraft_engine.domain.compensation import compensation_clause
from claimcraft_engine.domain.court_fees import court_fee_band
from claimcraft_engine.domain.exceptions import RecordValidationError
from claimcraft_engine.domain.models import Claim, CheckResult
from claimcraft_engine.domain.normalization import normalize_invoice, normalize_party
from claimcraft_engine.domain.parties import interest_act, interest_act_short, interest_rate_description
from claimcraft_engine.domain.statutory import StatutoryConfig
from claimcraft_engine.infrastructure.observability.logging import log_claim_calculation
from claimcraft_engine.infrastructure.observability.metrics import (
    normalization_failure_counter,
    record_claim_calculation,
)

router = APIRouter()


def build_claim(request_body: ClaimCalculationRequest) -> Tuple[Claim, List[str]]:
    """
    Normalise the raw records into a typed Claim.

    Raises:
        RecordValidationError: If any record cannot be normalised
    """
    claimant = normalize_party(request_body.claimant, role="claimant")
    defendant = normalize_party(request_body.defendant, role="defendant")
    invoice = normalize_invoice(request_body.invoice, today=request_body.as_of)

    errors: List[str] = []
    warnings: List[str] = []
    for record, result in (("claimant", claimant), ("defendant", defendant), ("invoice", invoice)):
        warnings.extend(result.warnings)
        if not result.is_valid:
            normalization_failure_counter.labels(record=record).inc()
            errors.extend(result.errors)

    if errors:
        raise RecordValidationError(errors)

    return Claim(claimant=claimant.value, defendant=defendant.value, invoice=invoice.value), warnings


def _check(result: CheckResult) -> CheckSchema:
    return CheckSchema(passed=result.passed, message=result.message)


@router.post(
    "/claims/calculate",
    response_model=ClaimCalculationResponse,
    responses={422: {"model": ValidationErrorResponse}},
)
def calculate_claim_endpoint(
    request_body: ClaimCalculationRequest,
    request: Request,
    config: StatutoryConfig = Depends(get_statutory_config),
):
    """
    Recalculate every derived figure for a claim.

    Flow:
    1. Normalise claimant, defendant and invoice records
    2. Interest and compensation under the applicable regime
    3. Court fee on the total claim value
    4. Limitation, value and solvency checks
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        claim, warnings = build_claim(request_body)
        calculation = calculate_claim(claim, config, today=request_body.as_of)

    except RecordValidationError as e:
        logging.warning(f"Claim rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail={"errors": e.errors})

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    financials = calculation.financials
    assessment = calculation.assessment
    interest = financials.interest

    duration_ms = (time.time() - start_time) * 1000
    record_claim_calculation(assessment.is_viable, court_fee_band(financials.total_debt))
    log_claim_calculation(
        request_id,
        interest.is_b2b,
        interest.days_overdue,
        financials.total_debt,
        financials.court_fee,
        assessment.is_viable,
        duration_ms,
    )

    return ClaimCalculationResponse(
        principal=claim.invoice.total_amount,
        interest=InterestSchema(
            days_overdue=interest.days_overdue,
            daily_rate=interest.daily_rate,
            total_interest=interest.total_interest,
            annual_rate_percent=interest.annual_rate_percent,
            is_b2b=interest.is_b2b,
            interest_act=interest_act(interest.is_b2b),
            interest_act_short=interest_act_short(interest.is_b2b),
            rate_description=interest_rate_description(interest.is_b2b),
        ),
        compensation=financials.compensation,
        compensation_clause=compensation_clause(interest.is_b2b, financials.compensation),
        court_fee=financials.court_fee,
        total_debt=financials.total_debt,
        grand_total=financials.grand_total,
        assessment=AssessmentSchema(
            is_viable=assessment.is_viable,
            limitation_check=_check(assessment.limitation_check),
            value_check=_check(assessment.value_check),
            solvency_check=_check(assessment.solvency_check),
            recommendation=assessment.recommendation,
        ),
        warnings=warnings,
    )
