"""
Simplified timelines for stored mergers.

A stored merger only keeps its filing date, current status label, status
date and whether it entered Phase 2, so its timeline is rebuilt from typical
phase lengths rather than from the statutory milestone schedule.
"""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from mergerclock.business_calendar.date_utils import add_business_days
from mergerclock.conventions.calendars_quantlib import Calendar
from mergerclock.schema.enums import MergerOutcome
from mergerclock.schema.records import Merger
from mergerclock.schedule.core import PHASE1_DETERMINATION_OFFSET

PHASE2_TYPICAL_DAYS = 90


@dataclass
class HistoryEvent:
    id: str
    name: str
    date: date
    type: str
    description: str
    completed: bool = False
    current: bool = False

    @property
    def upcoming(self) -> bool:
        return not self.completed


_DECISIONS = {
    MergerOutcome.BLOCKED: "Merger rejected",
    MergerOutcome.CLEARED_WITH_COMMITMENTS: "Merger approved with conditions",
    MergerOutcome.CLEARED: "Merger approved unconditionally",
}


def reconstruct_timeline(
    merger: Merger, current_date: Optional[date] = None, calendar: Calendar = None
) -> List[HistoryEvent]:
    """
    Rebuild an approximate review timeline for a stored merger.

    Events dated on or before current_date are completed; the first later
    event is marked current.
    """
    if current_date is None:
        current_date = date.today()

    filing = merger.start_date
    phase1_end = add_business_days(filing, PHASE1_DETERMINATION_OFFSET, calendar)
    events = [
        HistoryEvent(f"{merger.id}-filing", "Filing Date", filing, "filing",
                     "Initial merger notification filed with ACCC"),
        HistoryEvent(f"{merger.id}-phase1Start", "Phase 1 Start", filing, "phase1Start",
                     "Phase 1 review initiated"),
        HistoryEvent(f"{merger.id}-phase1End", "Phase 1 End", phase1_end, "phase1End",
                     f"Phase 1 review due after {PHASE1_DETERMINATION_OFFSET} business days"),
    ]

    if merger.has_phase_2:
        phase2_end = add_business_days(phase1_end, PHASE2_TYPICAL_DAYS, calendar)
        events += [
            HistoryEvent(f"{merger.id}-phase2Start", "Phase 2 Start", phase1_end, "phase2Start",
                         "Phase 2 in-depth investigation initiated"),
            HistoryEvent(f"{merger.id}-phase2End", "Phase 2 End", phase2_end, "phase2End",
                         f"Phase 2 investigation due after {PHASE2_TYPICAL_DAYS} business days"),
        ]

    if merger.end_date is not None:
        description = _DECISIONS.get(merger.outcome, "Review closed")
        if not merger.has_phase_2 and merger.outcome != MergerOutcome.BLOCKED:
            description += " in Phase 1"
        events.append(
            HistoryEvent(f"{merger.id}-decision", "Final Decision", merger.end_date,
                         "decision", description)
        )

    events.sort(key=lambda e: e.date)
    for event in events:
        event.completed = event.date <= current_date
    upcoming = next((e for e in events if not e.completed), None)
    if upcoming is not None:
        upcoming.current = True
    return events
