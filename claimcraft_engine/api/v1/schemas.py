"""Pydantic schemas for API request/response validation"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from claimcraft_engine.domain.models import (
    DeadlinePriority,
    DeadlineStatus,
    DeadlineType,
    LifecycleEvent,
    PartyType,
)


class ClaimCalculationRequest(BaseModel):
    """Request body for POST /v1/claims/calculate

    Party and invoice fields are accepted as loosely-typed mappings (form
    posts, CSV rows, accounting exports) and normalised server-side.
    """

    claimant: Dict[str, Any]
    defendant: Dict[str, Any]
    invoice: Dict[str, Any]
    as_of: Optional[date] = Field(None, description="Calculation date (default: today)")


class InterestSchema(BaseModel):
    days_overdue: int
    daily_rate: Decimal
    total_interest: Decimal
    annual_rate_percent: Decimal
    is_b2b: bool
    interest_act: str
    interest_act_short: str
    rate_description: str


class CheckSchema(BaseModel):
    passed: bool
    message: str


class AssessmentSchema(BaseModel):
    is_viable: bool
    limitation_check: CheckSchema
    value_check: CheckSchema
    solvency_check: CheckSchema
    recommendation: str


class ClaimCalculationResponse(BaseModel):
    """Response for POST /v1/claims/calculate"""

    principal: Decimal
    interest: InterestSchema
    compensation: Decimal
    compensation_clause: str
    court_fee: Decimal
    total_debt: Decimal
    grand_total: Decimal
    assessment: AssessmentSchema
    warnings: List[str] = []


class ValidationErrorResponse(BaseModel):
    errors: List[str]
    warnings: List[str] = []


class CourtFeeResponse(BaseModel):
    """Response for GET /v1/court-fee"""

    amount: Decimal
    court_fee: Decimal


class ProceduralDeadlinesRequest(BaseModel):
    """Request body for POST /v1/deadlines/procedural"""

    defendant_type: PartyType
    lba_date: Optional[date] = None
    service_date: Optional[date] = None
    acknowledgment_date: Optional[date] = None
    judgment_date: Optional[date] = None
    as_of: Optional[date] = None


class ProceduralDeadlinesResponse(BaseModel):
    lba_response_days: int
    lba_expiry_date: Optional[date] = None
    lba_expired: Optional[bool] = None
    acknowledgment_deadline: Optional[date] = None
    defence_deadline: Optional[date] = None
    default_judgment_available: Optional[bool] = None
    enforcement_date: Optional[date] = None


class DeadlineSuggestionRequest(BaseModel):
    """Request body for POST /v1/deadlines/suggestions"""

    claim_id: str = Field(..., min_length=1)
    event: LifecycleEvent
    event_date: date
    defendant_type: PartyType
    service_date: Optional[date] = None


class DeadlineSchema(BaseModel):
    id: str
    claim_id: str
    type: DeadlineType
    title: str
    due_date: date
    priority: DeadlinePriority = DeadlinePriority.MEDIUM
    status: DeadlineStatus = DeadlineStatus.PENDING
    description: str = ""
    legal_reference: Optional[str] = None
    snoozed_until: Optional[date] = None
    completed_at: Optional[datetime] = None


class DeadlineListResponse(BaseModel):
    deadlines: List[DeadlineSchema]


class ICalExportRequest(BaseModel):
    """Request body for POST /v1/deadlines/ical"""

    deadlines: List[DeadlineSchema]
