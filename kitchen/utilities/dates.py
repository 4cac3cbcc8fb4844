"""Date helpers for persisted snapshots.

Dates are written as ISO-8601 text. Plain dates use ``YYYY-MM-DD``; values that
carry a time of day keep it (``datetime.isoformat()``), since the planner does
not normalise the time component. A trailing ``Z`` (as written by browsers)
is accepted on load.
"""
from __future__ import annotations
from datetime import date, datetime
from typing import Optional, Union

from kitchen.utilities.constants import DATE_FORMAT

DateLike = Union[date, datetime]

__all__ = ["DateLike", "format_date", "parse_date", "parse_optional_date", "as_day"]


def format_date(value: DateLike) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    return value.strftime(DATE_FORMAT)


def parse_date(text: str) -> DateLike:
    """Parse ISO text into a date (day only) or a datetime (time given)."""
    if not isinstance(text, str):
        raise ValueError(f"Expected ISO date text, got {type(text).__name__}")
    raw = text.strip()
    if len(raw) <= 10:
        return date.fromisoformat(raw)
    if raw.endswith('Z'):
        raw = raw[:-1] + '+00:00'
    return datetime.fromisoformat(raw)


def parse_optional_date(text: Optional[str]) -> Optional[DateLike]:
    '''Absent or empty values decode to None.'''
    if text is None or text == "":
        return None
    return parse_date(text)


def as_day(value: DateLike) -> date:
    '''Calendar day of a date or datetime.'''
    if isinstance(value, datetime):
        return value.date()
    return value
