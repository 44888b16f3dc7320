"""
Business day arithmetic for merger review timelines.
Provides standalone functions for stepping and counting business days against a calendar.
"""

from datetime import date, datetime
from typing import Optional, Union

from mergerclock.conventions.calendars_quantlib import (
    DEFAULT_CALENDAR_NAME,
    Calendar,
    get_calendar,
)

# Default calendar settings
_DEFAULT_CALENDAR: Optional[Calendar] = None  # Will be initialized on first use


def _get_default_calendar() -> Calendar:
    """Get default calendar, initializing if needed."""
    global _DEFAULT_CALENDAR
    if _DEFAULT_CALENDAR is None:
        _DEFAULT_CALENDAR = get_calendar(DEFAULT_CALENDAR_NAME)
    return _DEFAULT_CALENDAR


def get_default_calendar() -> Calendar:
    """Return the calendar used when callers do not pass one."""
    return _get_default_calendar()


def set_default_calendar(calendar_name: str) -> None:
    """Set the default calendar for date calculations."""
    global _DEFAULT_CALENDAR
    _DEFAULT_CALENDAR = get_calendar(calendar_name)


def _resolve(calendar: Optional[Calendar]) -> Calendar:
    return calendar if calendar is not None else _get_default_calendar()


def is_business_day(dt: Union[date, datetime], calendar: Calendar = None) -> bool:
    """True if dt is neither a weekend nor a listed holiday."""
    return _resolve(calendar).is_business_day(dt)


def add_business_days(
    start_date: Union[date, datetime], days: int, calendar: Calendar = None
) -> date:
    """
    Advance start_date by `days` business days.

    Each calendar day stepped over counts only if it is a business day, so the
    result is always a business day when days > 0. Zero days returns
    start_date unchanged.
    """
    if days < 0:
        return subtract_business_days(start_date, -days, calendar)
    return _resolve(calendar).add_business_days(start_date, days)


def subtract_business_days(
    start_date: Union[date, datetime], days: int, calendar: Calendar = None
) -> date:
    """Mirror of add_business_days, walking backward from start_date."""
    if days < 0:
        return add_business_days(start_date, -days, calendar)
    return _resolve(calendar).add_business_days(start_date, -days)


def business_days_between(
    start: Union[date, datetime], end: Union[date, datetime], calendar: Calendar = None
) -> int:
    """Business days in (start, end]; zero when end is not after start."""
    return _resolve(calendar).business_days_between(start, end)
