"""GET /v1/court-fee - court issue fee for a total claim value"""

from decimal import Decimal

from fastapi import APIRouter, Query

from claimcraft_engine.api.v1.schemas import CourtFeeResponse
from claimcraft_engine.domain.court_fees import calculate_court_fee

router = APIRouter()


@router.get("/court-fee", response_model=CourtFeeResponse)
def get_court_fee(
    amount: Decimal = Query(..., description="Total claim value: principal + interest + compensation"),
):
    """
    Look up the issue fee.

    Returns:
        The amount queried and its fee from the money-claims schedule
    """
    return CourtFeeResponse(amount=amount, court_fee=calculate_court_fee(amount))
