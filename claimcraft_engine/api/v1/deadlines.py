"""CPR deadline endpoints: procedural dates, lifecycle suggestions and iCal export"""

from dataclasses import asdict

from fastapi import APIRouter, HTTPException
from starlette.responses import Response

from claimcraft_engine.api.v1.schemas import (
    DeadlineListResponse,
    DeadlineSchema,
    DeadlineSuggestionRequest,
    ICalExportRequest,
    ProceduralDeadlinesRequest,
    ProceduralDeadlinesResponse,
)
from claimcraft_engine.domain.deadlines import (
    calculate_acknowledgment_deadline,
    calculate_defence_deadline,
    calculate_enforcement_date,
    calculate_lba_expiry_date,
    can_apply_for_default_judgment,
    has_lba_expired,
    lba_response_period_days,
    suggest_deadlines,
)
from claimcraft_engine.domain.models import Deadline
from claimcraft_engine.infrastructure.export.ical import deadlines_to_ical
from claimcraft_engine.infrastructure.observability.metrics import deadline_suggestion_counter

router = APIRouter()


@router.post("/deadlines/procedural", response_model=ProceduralDeadlinesResponse)
def get_procedural_deadlines(request_body: ProceduralDeadlinesRequest):
    """
    Work out every deadline that follows from the events supplied so far.

    Fields whose triggering event has not happened are left null.
    Re-query after each new event: an acknowledgment moves the defence
    deadline.
    """
    body = request_body
    response = ProceduralDeadlinesResponse(lba_response_days=lba_response_period_days(body.defendant_type))

    if body.lba_date:
        response.lba_expiry_date = calculate_lba_expiry_date(body.lba_date, body.defendant_type)
        response.lba_expired = has_lba_expired(body.lba_date, body.defendant_type, today=body.as_of)

    if body.service_date:
        defence_deadline = calculate_defence_deadline(body.service_date, body.acknowledgment_date)
        response.acknowledgment_deadline = calculate_acknowledgment_deadline(body.service_date)
        response.defence_deadline = defence_deadline
        response.default_judgment_available = can_apply_for_default_judgment(defence_deadline, today=body.as_of)

    if body.judgment_date:
        response.enforcement_date = calculate_enforcement_date(body.judgment_date)

    return response


@router.post("/deadlines/suggestions", response_model=DeadlineListResponse)
def get_deadline_suggestions(request_body: DeadlineSuggestionRequest):
    """Suggested deadlines for a lifecycle event; the caller stores the ones it accepts"""
    try:
        suggestions = suggest_deadlines(
            request_body.claim_id,
            request_body.event,
            request_body.event_date,
            request_body.defendant_type,
            service_date=request_body.service_date,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    deadline_suggestion_counter.labels(event=request_body.event.value).inc()
    return DeadlineListResponse(deadlines=[DeadlineSchema(**asdict(d)) for d in suggestions])


@router.post("/deadlines/ical")
def export_deadlines_ical(request_body: ICalExportRequest):
    """Export deadlines as an .ics attachment"""
    deadlines = [Deadline(**d.model_dump()) for d in request_body.deadlines]
    return Response(
        content=deadlines_to_ical(deadlines),
        media_type="text/calendar",
        headers={"Content-Disposition": "attachment; filename=claimcraft-deadlines.ics"},
    )
