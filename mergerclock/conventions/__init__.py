"""Calendars, holidays and option enums."""

from .calendars_quantlib import (
    ACCC,
    CALENDARS,
    WEEKEND_ONLY,
    AcccCalendar,
    Calendar,
    WeekendCalendar,
    get_calendar,
)
from .holidays import ACCC_HOLIDAYS
from .types import CalendarType, CommitmentPhase, PhaseOption

__all__ = [
    "Calendar",
    "AcccCalendar",
    "WeekendCalendar",
    "ACCC",
    "WEEKEND_ONLY",
    "CALENDARS",
    "ACCC_HOLIDAYS",
    "get_calendar",
    "CalendarType",
    "CommitmentPhase",
    "PhaseOption",
]
