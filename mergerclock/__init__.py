"""Merger Review Timeline Engine.

This package computes statutory merger-review milestones in business days,
skipping weekends and a fixed public holiday calendar, and layers on
stop-clock periods and commitments-driven extensions.

Key modules:
- conventions: Calendars, holidays and option enums
- business_calendar: Business day arithmetic
- schedule: Milestone schedule
- timeline: Timeline composer, projections and history reconstruction
- schema: Merger record schemas
- data: Merger record stores
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Main modules are imported via subpackages
    "conventions",
    "business_calendar",
    "schedule",
    "timeline",
    "schema",
    "data",
]
