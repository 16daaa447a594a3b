"""Parsing of user-supplied dates: CLI bounds and dates mentioned in questions."""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta, tzinfo

from dateutil import tz

_DATE_ARG = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")

_MONTHS = {
    "january": 1, "jan": 1,
    "february": 2, "feb": 2,
    "march": 3, "mar": 3,
    "april": 4, "apr": 4,
    "may": 5,
    "june": 6, "jun": 6,
    "july": 7, "jul": 7,
    "august": 8, "aug": 8,
    "september": 9, "sept": 9, "sep": 9,
    "october": 10, "oct": 10,
    "november": 11, "nov": 11,
    "december": 12, "dec": 12,
}
_MONTH = "|".join(sorted(_MONTHS, key=len, reverse=True))
_ORDINAL = r"(?:st|nd|rd|th)?"

_MONTH_DAY = re.compile(rf"\b({_MONTH})\.?\s+(\d{{1,2}}){_ORDINAL}\b")
_DAY_MONTH = re.compile(rf"\b(\d{{1,2}}){_ORDINAL}\s+(?:of\s+)?({_MONTH})\b")
_SLASHED = re.compile(r"\b(\d{1,2})/(\d{1,2})\b")
_BARE_ORDINAL = re.compile(r"\b(\d{1,2})(?:st|nd|rd|th)\b")


def parse_date_bound(
    value: str, end: bool = False, zone: tzinfo | None = None
) -> datetime:
    """Parse ``yyyy-M-d`` into the start of that day, or its last instant if ``end``.

    Raises:
        ValueError: if ``value`` is not a valid ``yyyy-M-d`` date.
    """
    match = _DATE_ARG.match(value.strip())
    if not match:
        raise ValueError(
            f"Invalid date {value!r}. Please use yyyy-MM-dd (example: 2025-05-28)."
        )
    year, month, day = (int(part) for part in match.groups())
    day_start, day_end = day_bounds(date(year, month, day), zone)
    return day_end if end else day_start


def _safe_date(year: int, month: int, day: int) -> date | None:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def extract_date_from_question(question: str, today: date | None = None) -> date | None:
    """Find a calendar date mentioned in ``question``, assuming the current year.

    Recognizes "May 26th", "26 May", "26th of May", "26/05", "05/26" and a bare
    ordinal such as "the 26th" (current month). Slashed dates are read as
    month/day unless only day/month is valid.
    """
    if not question:
        return None
    today = today or date.today()
    text = question.lower()

    match = _MONTH_DAY.search(text)
    if match:
        return _safe_date(today.year, _MONTHS[match.group(1)], int(match.group(2)))

    match = _DAY_MONTH.search(text)
    if match:
        return _safe_date(today.year, _MONTHS[match.group(2)], int(match.group(1)))

    match = _SLASHED.search(text)
    if match:
        first, second = int(match.group(1)), int(match.group(2))
        if first > 12:
            return _safe_date(today.year, second, first)
        return _safe_date(today.year, first, second) or _safe_date(today.year, second, first)

    match = _BARE_ORDINAL.search(text)
    if match:
        return _safe_date(today.year, today.month, int(match.group(1)))

    return None


def day_bounds(day: date, zone: tzinfo | None = None) -> tuple[datetime, datetime]:
    """First and last instant of ``day`` in ``zone`` (local time by default)."""
    start = datetime.combine(day, time.min, tzinfo=zone or tz.tzlocal())
    return start, start + timedelta(days=1) - timedelta(microseconds=1)
