"""
Review timeline composer.

Builds the dated milestone events of a merger review from a filing date,
layering the optional modifiers in a fixed order:

1. pre-assessment lead (display only, ends at the filing date);
2. stop clock, which pushes back every milestone whose unshifted date falls on
   or after the stop-clock start;
3. commitments, which extend the targeted phase determination and, for a
   Phase 1 extension, every later Phase 2 milestone.

Stop clock is resolved before commitments and both add up when they hit the
same milestone.
"""

import logging
from dataclasses import dataclass, replace
from datetime import date
from functools import reduce
from typing import List, Optional, Tuple, Union

from mergerclock.business_calendar.date_utils import (
    add_business_days,
    business_days_between,
    subtract_business_days,
)
from mergerclock.conventions.calendars_quantlib import Calendar
from mergerclock.conventions.types import CommitmentPhase, PhaseOption
from mergerclock.schedule.core import PHASE1_DETERMINATION_OFFSET, MilestoneDefinition
from mergerclock.schedule.milestones import (
    PHASE1_DETERMINATION,
    PHASE2_DETERMINATION,
    get_schedule,
    is_phase_decision,
)
from mergerclock.utils.date import DateLike, to_date, to_optional_date, weekday_name

from .projection import total_business_days
from .types import (
    FILING_DATE,
    PRE_ASSESSMENT_START,
    STOP_CLOCK_END,
    STOP_CLOCK_START,
    CommitmentsExtension,
    EventFlags,
    PreAssessmentPeriod,
    StopClockPeriod,
    StopClockWindow,
    TimelineEvent,
    TimelineInputs,
    TimelineResult,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _FoldState:
    """Accumulator threaded through the milestone pass."""

    events: Tuple[TimelineEvent, ...] = ()
    stop_clock_emitted: bool = False
    carry_days: int = 0


def _make_event(
    name: str,
    offset: int,
    event_date: date,
    current_date: date,
    flags: EventFlags = EventFlags(),
    extension_days: Optional[int] = None,
    stop_clock_duration: Optional[int] = None,
) -> TimelineEvent:
    return TimelineEvent(
        event_name=name,
        business_day_offset=offset,
        date=event_date,
        weekday_name=weekday_name(event_date),
        flags=flags,
        extension_days_applied=extension_days,
        is_in_past=event_date < current_date,
        stop_clock_duration=stop_clock_duration,
    )


class _MilestoneStep:
    """Fold function applying stop clock then commitments to one milestone."""

    def __init__(
        self,
        filing_date: date,
        stop_clock: Optional[StopClockPeriod],
        commitments: Optional[CommitmentsExtension],
        current_date: date,
        calendar: Optional[Calendar],
    ):
        self.filing_date = filing_date
        self.stop_clock = stop_clock
        self.commitments = commitments
        self.current_date = current_date
        self.calendar = calendar

    def _stop_clock_events(self) -> Tuple[TimelineEvent, TimelineEvent]:
        start = self.stop_clock.start_date
        duration = self.stop_clock.duration_business_days
        start_day = business_days_between(self.filing_date, start, self.calendar)
        end = add_business_days(start, duration, self.calendar)
        return (
            _make_event(
                STOP_CLOCK_START,
                start_day,
                start,
                self.current_date,
                flags=EventFlags(is_stop_clock_start=True),
                stop_clock_duration=duration,
            ),
            _make_event(
                STOP_CLOCK_END,
                start_day + duration,
                end,
                self.current_date,
                flags=EventFlags(is_stop_clock_end=True),
            ),
        )

    def _commitment_days(self, milestone: MilestoneDefinition, carry_days: int) -> Tuple[int, int]:
        """Return (extension applied to this milestone, carry for later milestones)."""
        if self.commitments is None:
            return 0, carry_days

        phase = self.commitments.phase
        duration = self.commitments.duration_business_days
        if phase == CommitmentPhase.PHASE1 and milestone.name == PHASE1_DETERMINATION:
            return duration, duration
        if phase == CommitmentPhase.PHASE2 and milestone.name == PHASE2_DETERMINATION:
            return duration, carry_days
        if carry_days > 0 and milestone.business_day_offset > PHASE1_DETERMINATION_OFFSET:
            return carry_days, carry_days
        return 0, carry_days

    def __call__(self, state: _FoldState, milestone: MilestoneDefinition) -> _FoldState:
        base_date = add_business_days(
            self.filing_date, milestone.business_day_offset, self.calendar
        )
        event_date = base_date
        offset = milestone.business_day_offset
        emitted: Tuple[TimelineEvent, ...] = ()
        stop_clock_emitted = state.stop_clock_emitted

        if self.stop_clock is not None and base_date >= self.stop_clock.start_date:
            if not stop_clock_emitted:
                emitted += self._stop_clock_events()
                stop_clock_emitted = True
            duration = self.stop_clock.duration_business_days
            event_date = add_business_days(event_date, duration, self.calendar)
            offset += duration

        extension, carry_days = self._commitment_days(milestone, state.carry_days)
        if extension:
            event_date = add_business_days(event_date, extension, self.calendar)
            offset += extension

        logger.debug(
            "%s: base %s -> %s (day %s, extension %s)",
            milestone.name, base_date, event_date, offset, extension or None,
        )

        emitted += (
            _make_event(
                milestone.name,
                offset,
                event_date,
                self.current_date,
                flags=EventFlags(is_phase_decision=is_phase_decision(milestone.name)),
                extension_days=extension or None,
            ),
        )
        return replace(
            state,
            events=state.events + emitted,
            stop_clock_emitted=stop_clock_emitted,
            carry_days=carry_days,
        )


def compose_timeline(
    filing_date: Optional[DateLike],
    phase_option: Union[str, PhaseOption] = PhaseOption.PHASE1_AND_2,
    pre_assessment: Optional[PreAssessmentPeriod] = None,
    stop_clock: Optional[StopClockPeriod] = None,
    commitments: Optional[CommitmentsExtension] = None,
    current_date: Optional[DateLike] = None,
    calendar: Calendar = None,
) -> List[TimelineEvent]:
    """
    Compose the ordered review timeline for a filing date.

    Args:
        filing_date: Date the merger was notified (date, datetime, Timestamp or
            string); None yields an empty timeline
        phase_option: "phase1" or "phase1and2" schedule
        pre_assessment: Optional lead time before filing
        stop_clock: Optional stop-clock period
        commitments: Optional commitments extension
        current_date: Reference "today" for is_in_past (defaults to date.today())
        calendar: Business day calendar (defaults to the module default)

    Returns:
        Events sorted by date ascending
    """
    filing_date = to_optional_date(filing_date)
    if filing_date is None:
        return []
    current_date = date.today() if current_date is None else to_date(current_date)

    schedule = get_schedule(phase_option)
    events: List[TimelineEvent] = []

    lead = pre_assessment.lead_business_days if pre_assessment is not None else 0
    if lead > 0:
        start = subtract_business_days(filing_date, lead, calendar)
        events.append(
            _make_event(
                PRE_ASSESSMENT_START,
                -lead,
                start,
                current_date,
                flags=EventFlags(is_pre_assessment=True),
            )
        )

    events.append(_make_event(FILING_DATE, 0, filing_date, current_date))

    step = _MilestoneStep(filing_date, stop_clock, commitments, current_date, calendar)
    final_state = reduce(step, schedule, _FoldState())
    events.extend(final_state.events)

    # Shifts can move events out of nominal offset order
    return sorted(events, key=lambda e: e.date)


def stop_clock_window(events: List[TimelineEvent]) -> Optional[StopClockWindow]:
    """Locate the stop-clock band in a composed timeline, if one was applied."""
    start = next((e for e in events if e.flags.is_stop_clock_start), None)
    end = next((e for e in events if e.flags.is_stop_clock_end), None)
    if start is None or end is None:
        return None
    return StopClockWindow(
        start_date=start.date,
        end_date=end.date,
        duration=start.stop_clock_duration or 0,
        start_day=start.business_day_offset,
    )


def calculate_timeline(
    inputs: TimelineInputs,
    current_date: Optional[date] = None,
    calendar: Calendar = None,
) -> TimelineResult:
    """Compose the timeline for validated inputs and compute its summary figures."""
    events = compose_timeline(
        inputs.filing_date,
        inputs.phase_option,
        pre_assessment=inputs.pre_assessment,
        stop_clock=inputs.stop_clock,
        commitments=inputs.commitments,
        current_date=current_date,
        calendar=calendar,
    )
    return TimelineResult(
        events=events,
        total_business_days=total_business_days(events, inputs.pre_assessment),
        stop_clock_window=stop_clock_window(events),
        inputs=inputs,
    )
