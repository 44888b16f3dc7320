"""
QuantLib-backed calendar implementations.

Business days are weekdays that are not listed public holidays. The holiday
list is loaded into a QuantLib BespokeCalendar so that day stepping and
counting use QuantLib's calendar arithmetic.
"""

import logging
import os
from datetime import date, datetime
from typing import FrozenSet, Iterable, Union

import QuantLib as ql

from .holidays import ACCC_HOLIDAYS
from .types import CalendarType

logger = logging.getLogger(__name__)


def _to_ql_date(dt: Union[date, datetime]) -> ql.Date:
    """Convert Python date/datetime to QuantLib Date."""
    if isinstance(dt, datetime):
        dt = dt.date()
    return ql.Date(dt.day, dt.month, dt.year)


def _to_py_date(ql_date: ql.Date) -> date:
    """Convert QuantLib Date to Python date."""
    return date(ql_date.year(), ql_date.month(), ql_date.dayOfMonth())


class Calendar:
    """Base calendar class for QuantLib-backed business day calculations."""

    def __init__(self, name: str, ql_calendar: ql.Calendar, holidays: Iterable[date] = ()):
        self.name = name
        self._ql_calendar = ql_calendar
        self._holidays: FrozenSet[date] = frozenset(holidays)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    @property
    def holidays(self) -> FrozenSet[date]:
        """Listed (non-weekend) holidays of this calendar."""
        return self._holidays

    def is_business_day(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a business day (not weekend or holiday)."""
        return self._ql_calendar.isBusinessDay(_to_ql_date(dt))

    def is_holiday(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a non-business day (weekend or listed holiday)."""
        return self._ql_calendar.isHoliday(_to_ql_date(dt))

    def add_business_days(self, start_date: Union[date, datetime], days: int) -> date:
        """Step `days` business days away from start_date (negative steps backward).

        Zero days returns start_date unchanged, even when it is not a business day.
        """
        if isinstance(start_date, datetime):
            start_date = start_date.date()
        if days == 0:
            return start_date

        # advance() walks one calendar day at a time and only counts business days
        ql_result = self._ql_calendar.advance(_to_ql_date(start_date), days, ql.Days)
        return _to_py_date(ql_result)

    def business_days_between(
        self, start: Union[date, datetime], end: Union[date, datetime]
    ) -> int:
        """Count business days between two dates (exclusive of start, inclusive of end)."""
        ql_start = _to_ql_date(start)
        ql_end = _to_ql_date(end)
        if ql_start >= ql_end:
            return 0
        return self._ql_calendar.businessDaysBetween(ql_start, ql_end, False, True)


def _bespoke_calendar(name: str, holidays: Iterable[date]) -> ql.Calendar:
    ql_calendar = ql.BespokeCalendar(name)
    ql_calendar.addWeekend(ql.Saturday)
    ql_calendar.addWeekend(ql.Sunday)
    count = 0
    for holiday in sorted(holidays):
        ql_calendar.addHoliday(_to_ql_date(holiday))
        count += 1
    logger.debug("Built %s calendar with %s holidays", name, count)
    return ql_calendar


class AcccCalendar(Calendar):
    """Merger review calendar: Saturdays, Sundays and the fixed public holiday list."""

    def __init__(self, holidays: Iterable[date] = ACCC_HOLIDAYS):
        holidays = frozenset(holidays)
        super().__init__("ACCC", _bespoke_calendar("ACCC", holidays), holidays)


class WeekendCalendar(Calendar):
    """Simple calendar that only considers weekends as non-business days."""

    def __init__(self):
        # Use QuantLib's WeekendsOnly calendar
        super().__init__("WEEKEND", ql.WeekendsOnly())


# Pre-defined calendar instances
ACCC = AcccCalendar()
WEEKEND_ONLY = WeekendCalendar()

# Calendar registry
CALENDARS = {
    "ACCC": ACCC,
    "AU": ACCC,  # Alias
    "WEEKEND": WEEKEND_ONLY,
}

DEFAULT_CALENDAR_NAME = os.getenv("MERGERCLOCK_CALENDAR", "ACCC")


def get_calendar(name: Union[str, CalendarType]) -> Calendar:
    """
    Get a calendar by name.

    Args:
        name: Calendar name ("ACCC", "AU" or "WEEKEND") or a CalendarType
    """
    if isinstance(name, CalendarType):
        name = name.value
    key = name.upper().strip() if isinstance(name, str) else name
    if key not in CALENDARS:
        raise ValueError(
            f"Unknown calendar: {name}. Available: {list(CALENDARS.keys())}"
        )
    return CALENDARS[key]
