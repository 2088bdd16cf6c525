"""Date parsing, validation and resolution utilities"""

import re
from datetime import date, datetime, timedelta, timezone
from typing import Any

MIN_YEAR = 1900
MAX_YEAR = 2100

# Accounting exports serialise dates as /Date(1672531200000+0000)/
_EPOCH_MS_PATTERN = re.compile(r"^/Date\((-?\d+)([+-]\d{4})?\)/$")
_UK_DATE_PATTERN = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")


def _within_window(value: date) -> date | None:
    if MIN_YEAR <= value.year <= MAX_YEAR:
        return value
    return None


def parse_date(value: Any) -> date | None:
    """
    Turn a raw date value of unknown provenance into a calendar date.

    Accepts date/datetime objects and strings in ISO (2024-01-31, with or
    without a time part), UK (31/01/2024) or /Date(epoch-ms)/ form.

    Returns:
        The date, or None when the value is missing, unparseable, not a real
        calendar date, or outside 1900-2100.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return _within_window(value.date())

    if isinstance(value, date):
        return _within_window(value)

    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    match = _EPOCH_MS_PATTERN.match(text)
    if match:
        try:
            parsed = datetime.fromtimestamp(int(match.group(1)) / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
        return _within_window(parsed.date())

    match = _UK_DATE_PATTERN.match(text)
    if match:
        day, month, year = (int(part) for part in match.groups())
        try:
            return _within_window(date(year, month, day))
        except ValueError:
            return None

    try:
        return _within_window(date.fromisoformat(text))
    except ValueError:
        pass

    try:
        return _within_window(datetime.fromisoformat(text.replace("Z", "+00:00")).date())
    except ValueError:
        return None


def resolve_due_date(
    date_issued: Any,
    due_date: Any,
    payment_terms_days: int,
) -> date | None:
    """
    Work out the date payment became due.

    An explicit, valid due date wins. Otherwise fall back to the issue date
    plus the default payment terms. Returns None when neither is usable.
    """
    explicit = parse_date(due_date)
    if explicit is not None:
        return explicit

    issued = parse_date(date_issued)
    if issued is None:
        return None

    return issued + timedelta(days=payment_terms_days)


def add_days(from_date: date, days: int) -> date:
    """Add calendar days to a date"""
    return from_date + timedelta(days=days)


def days_between(start: date, end: date) -> int:
    """Whole calendar days from start to end (negative if end is earlier)"""
    return (end - start).days


def is_past_date(value: Any, today: date | None = None) -> bool:
    """True if value is a valid date on or before today"""
    parsed = parse_date(value)
    if parsed is None:
        return False
    return parsed <= (today or date.today())
