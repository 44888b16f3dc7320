"""
Boundary validation for timeline inputs.

The composer assumes validated input; these helpers reproduce the clamping
the calculator form applies before each recalculation.
"""

from datetime import date
from typing import Any, Optional, Union

from mergerclock.conventions.types import CommitmentPhase, PhaseOption
from mergerclock.schedule.milestones import to_phase_option
from mergerclock.utils.date import DateLike, to_optional_date

from .types import (
    CommitmentsExtension,
    PreAssessmentPeriod,
    StopClockPeriod,
    TimelineInputs,
    to_commitment_phase,
)

MIN_COMMITMENT_DAYS = 1
MAX_COMMITMENT_DAYS = 15
DEFAULT_COMMITMENT_DAYS = 10


def _to_int(value: Any) -> int:
    # Unparsable form values count as zero
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def clamp_non_negative(value: Any) -> int:
    return max(_to_int(value), 0)


def clamp_commitment_duration(value: Any) -> int:
    """Clamp a commitments extension into [1, 15] business days."""
    return min(max(_to_int(value), MIN_COMMITMENT_DAYS), MAX_COMMITMENT_DAYS)


def validate_stop_clock(filing_date: date, stop_clock: StopClockPeriod) -> None:
    """Raise ValueError if the stop clock would start before the filing date."""
    if stop_clock.start_date < filing_date:
        raise ValueError(
            f"Stop clock start {stop_clock.start_date} precedes filing date {filing_date}"
        )


def build_inputs(
    filing_date: Optional[DateLike],
    phase_option: Union[str, PhaseOption] = PhaseOption.PHASE1_AND_2,
    pre_assessment_days: Any = 0,
    stop_clock_enabled: bool = False,
    stop_clock_date: Optional[DateLike] = None,
    stop_clock_days: Any = 0,
    commitments_enabled: bool = False,
    commitment_phase: Union[str, CommitmentPhase] = CommitmentPhase.PHASE1,
    extension_days: Any = DEFAULT_COMMITMENT_DAYS,
) -> TimelineInputs:
    """
    Turn raw form values into validated TimelineInputs.

    Durations are clamped, a stop clock without a start date is ignored, and a
    phase 2 commitment falls back to phase 1 when only Phase 1 is scheduled.
    """
    option = to_phase_option(phase_option)
    filing = to_optional_date(filing_date)

    lead = clamp_non_negative(pre_assessment_days)
    pre_assessment = PreAssessmentPeriod(lead) if lead > 0 else None

    stop_clock = None
    start = to_optional_date(stop_clock_date)
    if stop_clock_enabled and start is not None:
        stop_clock = StopClockPeriod(start, clamp_non_negative(stop_clock_days))
        if filing is not None:
            validate_stop_clock(filing, stop_clock)

    commitments = None
    if commitments_enabled:
        phase = to_commitment_phase(commitment_phase)
        if option == PhaseOption.PHASE1 and phase == CommitmentPhase.PHASE2:
            phase = CommitmentPhase.PHASE1
        commitments = CommitmentsExtension(phase, clamp_commitment_duration(extension_days))

    return TimelineInputs(
        filing_date=filing,
        phase_option=option,
        pre_assessment=pre_assessment,
        stop_clock=stop_clock,
        commitments=commitments,
    )
