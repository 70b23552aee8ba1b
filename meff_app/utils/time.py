"""
Calendar date utilities for session-based market data.

Market data is keyed by trading session, so every date that enters the
query engine is reduced to a plain ``datetime.date`` before comparison.
"""

from datetime import date, datetime
from typing import Union

DateLike = Union[date, datetime, str]


def as_calendar_date(value: DateLike) -> date:
    """
    Reduce a date-like value to its calendar date.

    Args:
        value: A date, a datetime (time of day is dropped) or an ISO string

    Returns:
        The calendar date

    Raises:
        ValueError: If the string is not an ISO date/datetime
        TypeError: If the value is of an unsupported type
    """
    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            return datetime.fromisoformat(text).date()

    raise TypeError(f"Unsupported date value: {value!r}")


def same_session(left: DateLike, right: DateLike) -> bool:
    """Check whether two date-like values fall on the same calendar date."""
    return as_calendar_date(left) == as_calendar_date(right)
