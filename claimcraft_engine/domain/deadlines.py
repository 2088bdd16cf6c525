"""CPR procedural deadlines and deadline lifecycle helpers"""

import uuid
from dataclasses import replace
from datetime import date, datetime, timezone
from typing import Iterable, List

from claimcraft_engine.domain.models import (
    Deadline,
    DeadlinePriority,
    DeadlineStatus,
    DeadlineType,
    LifecycleEvent,
    PartyType,
)
from claimcraft_engine.domain.parties import PartyTypeLike, coerce_party_type
from claimcraft_engine.utils.date_utils import add_days

# Pre-Action Protocol for Debt Claims
LBA_RESPONSE_DAYS_CONSUMER = 30
LBA_RESPONSE_DAYS_BUSINESS = 14

ACKNOWLEDGMENT_PERIOD_DAYS = 14  # CPR 10.3
DEFENCE_AFTER_ACKNOWLEDGMENT_DAYS = 14  # CPR 15.4(1)(b)
DEFENCE_WITHOUT_ACKNOWLEDGMENT_DAYS = 28  # CPR 15.4(1)(a)
ENFORCEMENT_WAIT_DAYS = 14


def lba_response_period_days(defendant_type: PartyTypeLike) -> int:
    """30 days for an individual debtor, 14 for a business or sole trader"""
    if coerce_party_type(defendant_type) == PartyType.INDIVIDUAL:
        return LBA_RESPONSE_DAYS_CONSUMER
    return LBA_RESPONSE_DAYS_BUSINESS


def calculate_lba_expiry_date(lba_date: date, defendant_type: PartyTypeLike) -> date:
    return add_days(lba_date, lba_response_period_days(defendant_type))


def has_lba_expired(lba_date: date, defendant_type: PartyTypeLike, today: date | None = None) -> bool:
    return (today or date.today()) > calculate_lba_expiry_date(lba_date, defendant_type)


def calculate_acknowledgment_deadline(service_date: date) -> date:
    """CPR Part 10: 14 days from service, whoever the defendant is"""
    return add_days(service_date, ACKNOWLEDGMENT_PERIOD_DAYS)


def calculate_defence_deadline(service_date: date, acknowledgment_date: date | None = None) -> date:
    """
    CPR Part 15 defence deadline.

    - Acknowledged: 14 days after the acknowledgment
    - Not acknowledged: 28 days after service
    """
    if acknowledgment_date is not None:
        return add_days(acknowledgment_date, DEFENCE_AFTER_ACKNOWLEDGMENT_DAYS)
    return add_days(service_date, DEFENCE_WITHOUT_ACKNOWLEDGMENT_DAYS)


def can_apply_for_default_judgment(defence_deadline: date, today: date | None = None) -> bool:
    """CPR Part 12: available once the defence deadline has passed"""
    return (today or date.today()) > defence_deadline


def calculate_enforcement_date(judgment_date: date) -> date:
    """Advisory wait after judgment before enforcing"""
    return add_days(judgment_date, ENFORCEMENT_WAIT_DAYS)


def _new_deadline(
    claim_id: str,
    deadline_type: DeadlineType,
    title: str,
    due_date: date,
    priority: DeadlinePriority,
    description: str,
    legal_reference: str,
) -> Deadline:
    return Deadline(
        id=str(uuid.uuid4()),
        claim_id=claim_id,
        type=deadline_type,
        title=title,
        due_date=due_date,
        priority=priority,
        description=description,
        legal_reference=legal_reference,
    )


def _defence_suggestions(claim_id: str, service_date: date, acknowledgment_date: date | None) -> List[Deadline]:
    defence_deadline = calculate_defence_deadline(service_date, acknowledgment_date)
    return [
        _new_deadline(
            claim_id,
            DeadlineType.DEFENCE,
            "Defence due",
            defence_deadline,
            DeadlinePriority.CRITICAL,
            "Last day for the defendant to file a defence.",
            "CPR 15.4",
        ),
        _new_deadline(
            claim_id,
            DeadlineType.DEFAULT_JUDGMENT,
            "Default judgment available",
            add_days(defence_deadline, 1),
            DeadlinePriority.MEDIUM,
            "If no defence has been filed you can request default judgment.",
            "CPR 12.3",
        ),
    ]


def suggest_deadlines(
    claim_id: str,
    event: LifecycleEvent,
    event_date: date,
    defendant_type: PartyTypeLike,
    service_date: date | None = None,
) -> List[Deadline]:
    """
    Deadlines that follow from a procedural event.

    - lba_sent: LBA response window expiry
    - claim_served: acknowledgment, defence (no-acknowledgment branch), default judgment
    - acknowledged: defence and default judgment recomputed from the
      acknowledgment; needs the service_date
    - judgment_entered: earliest sensible enforcement date

    The engine does not track which stage a claim is at; the caller decides
    which event happened and replaces superseded deadlines.
    """
    if event == LifecycleEvent.LBA_SENT:
        days = lba_response_period_days(defendant_type)
        return [
            _new_deadline(
                claim_id,
                DeadlineType.LBA_RESPONSE,
                "LBA response period ends",
                calculate_lba_expiry_date(event_date, defendant_type),
                DeadlinePriority.HIGH,
                f"The defendant has {days} days to respond to the Letter Before Action.",
                "Pre-Action Protocol for Debt Claims",
            )
        ]

    if event == LifecycleEvent.CLAIM_SERVED:
        return [
            _new_deadline(
                claim_id,
                DeadlineType.ACKNOWLEDGMENT_OF_SERVICE,
                "Acknowledgment of service due",
                calculate_acknowledgment_deadline(event_date),
                DeadlinePriority.HIGH,
                "Last day for the defendant to acknowledge service.",
                "CPR 10.3",
            ),
            *_defence_suggestions(claim_id, event_date, None),
        ]

    if event == LifecycleEvent.ACKNOWLEDGED:
        if service_date is None:
            raise ValueError("service_date is required to recompute the defence deadline")
        return _defence_suggestions(claim_id, service_date, event_date)

    if event == LifecycleEvent.JUDGMENT_ENTERED:
        return [
            _new_deadline(
                claim_id,
                DeadlineType.ENFORCEMENT,
                "Consider enforcement",
                calculate_enforcement_date(event_date),
                DeadlinePriority.LOW,
                "Allow the defendant time to pay the judgment before enforcing.",
                "CPR Part 70",
            )
        ]

    raise ValueError(f"Unsupported lifecycle event: {event}")


def complete_deadline(deadline: Deadline, completed_at: datetime | None = None) -> Deadline:
    return replace(
        deadline,
        status=DeadlineStatus.COMPLETED,
        completed_at=completed_at or datetime.now(timezone.utc),
    )


def snooze_deadline(deadline: Deadline, until: date) -> Deadline:
    """Push a deadline's reminder date later; the legal due date is kept"""
    if until <= deadline.due_date:
        raise ValueError("Snooze date must be after the deadline's due date")
    return replace(deadline, status=DeadlineStatus.SNOOZED, snoozed_until=until)


def effective_date(deadline: Deadline) -> date:
    if deadline.status == DeadlineStatus.SNOOZED and deadline.snoozed_until:
        return deadline.snoozed_until
    return deadline.due_date


def is_deadline_overdue(deadline: Deadline, today: date | None = None) -> bool:
    if deadline.status == DeadlineStatus.COMPLETED:
        return False
    return effective_date(deadline) < (today or date.today())


def deadlines_for_claim(deadlines: Iterable[Deadline], claim_id: str) -> List[Deadline]:
    return sorted((d for d in deadlines if d.claim_id == claim_id), key=effective_date)


def remove_claim_deadlines(deadlines: Iterable[Deadline], claim_id: str) -> List[Deadline]:
    """Deadlines remaining after their owning claim is deleted"""
    return [d for d in deadlines if d.claim_id != claim_id]
