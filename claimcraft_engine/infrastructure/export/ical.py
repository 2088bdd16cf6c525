"""iCalendar (RFC 5545) export of claim deadlines"""

from datetime import datetime, timezone
from typing import Iterable, List, Mapping, Optional

from claimcraft_engine.domain.models import Claim, Deadline, DeadlinePriority, DeadlineStatus
from claimcraft_engine.utils.money import currency_symbol, format_currency

PRODID = "-//ClaimCraft UK//Debt Recovery Assistant//EN"
UID_DOMAIN = "claimcraft.uk"

# iCal priority: 1 highest, 9 lowest
ICAL_PRIORITY = {
    DeadlinePriority.CRITICAL: 1,
    DeadlinePriority.HIGH: 3,
    DeadlinePriority.MEDIUM: 5,
    DeadlinePriority.LOW: 9,
}


def escape_text(text: str) -> str:
    """Escape backslash, semicolon, comma and newlines for TEXT values"""
    return (
        text.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r", "")
        .replace("\n", "\\n")
    )


def _describe(deadline: Deadline, claim: Optional[Claim]) -> str:
    parts = [deadline.description]
    if claim is not None:
        amount = f"{currency_symbol(claim.invoice.currency)}{format_currency(claim.invoice.total_amount)}"
        parts.append(f"Claim: {claim.defendant.name}\nAmount: {amount}")
    if deadline.legal_reference:
        parts.append(f"Legal Reference: {deadline.legal_reference}")
    return "\n\n".join(part for part in parts if part)


def deadline_to_vevent(deadline: Deadline, claim: Optional[Claim] = None, now: Optional[datetime] = None) -> List[str]:
    """One all-day VEVENT with a reminder the day before"""
    stamp = (now or datetime.now(timezone.utc)).strftime("%Y%m%dT%H%M%SZ")
    status = "COMPLETED" if deadline.status == DeadlineStatus.COMPLETED else "NEEDS-ACTION"
    deadline_type = getattr(deadline.type, "value", deadline.type)

    return [
        "BEGIN:VEVENT",
        f"UID:{deadline.id}@{UID_DOMAIN}",
        f"DTSTAMP:{stamp}",
        f"DTSTART;VALUE=DATE:{deadline.due_date.strftime('%Y%m%d')}",
        f"SUMMARY:{escape_text(deadline.title)}",
        f"DESCRIPTION:{escape_text(_describe(deadline, claim))}",
        f"CATEGORIES:ClaimCraft,{deadline_type}",
        f"PRIORITY:{ICAL_PRIORITY.get(deadline.priority, 5)}",
        f"STATUS:{status}",
        "BEGIN:VALARM",
        "ACTION:DISPLAY",
        "DESCRIPTION:Deadline reminder",
        "TRIGGER:-P1D",
        "END:VALARM",
        "END:VEVENT",
    ]


def deadlines_to_ical(
    deadlines: Iterable[Deadline],
    claims: Optional[Mapping[str, Claim]] = None,
    now: Optional[datetime] = None,
) -> str:
    """
    Build a complete VCALENDAR for the given deadlines.

    Args:
        deadlines: Deadlines to export
        claims: Optional claim lookup by id, used to enrich descriptions
        now: DTSTAMP override (default: current UTC time)
    """
    claims = claims or {}
    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{PRODID}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
        "X-WR-CALNAME:ClaimCraft Deadlines",
        "X-WR-TIMEZONE:Europe/London",
    ]
    for deadline in deadlines:
        lines.extend(deadline_to_vevent(deadline, claims.get(deadline.claim_id), now))
    lines.append("END:VCALENDAR")

    # CRLF line endings per RFC 5545
    return "\r\n".join(lines) + "\r\n"
