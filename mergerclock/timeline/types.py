"""
Input modifiers and output events of the timeline composer.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Union

from mergerclock.conventions.types import CommitmentPhase, PhaseOption
from mergerclock.utils.date import to_date, to_optional_date

PRE_ASSESSMENT_START = "Pre-Assessment Period Start"
FILING_DATE = "Filing Date"
STOP_CLOCK_START = "Stop Clock Start"
STOP_CLOCK_END = "Stop Clock End"


def to_commitment_phase(value: Union[str, CommitmentPhase]) -> CommitmentPhase:
    """Accept either the enum or its string value ("phase1" / "phase2")."""
    if isinstance(value, CommitmentPhase):
        return value
    try:
        return CommitmentPhase(value)
    except ValueError:
        raise ValueError(
            f"Unknown commitment phase: {value!r}. "
            f"Available: {[p.value for p in CommitmentPhase]}"
        ) from None


@dataclass(frozen=True)
class PreAssessmentPeriod:
    """Pre-assessment lead time ending at the filing date."""

    lead_business_days: int = 0


@dataclass(frozen=True)
class StopClockPeriod:
    """A single stop-clock pause, starting on or after the filing date."""

    start_date: date
    duration_business_days: int = 0

    def __post_init__(self):
        object.__setattr__(self, "start_date", to_date(self.start_date))


@dataclass(frozen=True)
class CommitmentsExtension:
    """Extension of a phase determination triggered by a commitments proposal."""

    phase: CommitmentPhase
    duration_business_days: int = 10

    def __post_init__(self):
        object.__setattr__(self, "phase", to_commitment_phase(self.phase))


@dataclass(frozen=True)
class EventFlags:
    is_stop_clock_start: bool = False
    is_stop_clock_end: bool = False
    is_phase_decision: bool = False
    is_pre_assessment: bool = False


@dataclass
class TimelineEvent:
    """A dated point on the review timeline."""

    event_name: str
    business_day_offset: int
    date: date
    weekday_name: str
    flags: EventFlags = field(default_factory=EventFlags)
    extension_days_applied: Optional[int] = None
    is_in_past: bool = False
    stop_clock_duration: Optional[int] = None

    @property
    def is_extended(self) -> bool:
        return self.extension_days_applied is not None


@dataclass(frozen=True)
class StopClockWindow:
    """Start/end of the stop-clock band drawn on the chart."""

    start_date: date
    end_date: date
    duration: int
    start_day: int


@dataclass(frozen=True)
class TimelineInputs:
    """The full parameter set of one timeline calculation."""

    filing_date: Optional[date]
    phase_option: Union[PhaseOption, str] = PhaseOption.PHASE1_AND_2
    pre_assessment: Optional[PreAssessmentPeriod] = None
    stop_clock: Optional[StopClockPeriod] = None
    commitments: Optional[CommitmentsExtension] = None

    def __post_init__(self):
        object.__setattr__(self, "filing_date", to_optional_date(self.filing_date))


@dataclass
class TimelineResult:
    """Composer output together with the figures the table, chart and export need."""

    events: List[TimelineEvent]
    total_business_days: int
    stop_clock_window: Optional[StopClockWindow]
    inputs: TimelineInputs

    @property
    def is_empty(self) -> bool:
        return not self.events
