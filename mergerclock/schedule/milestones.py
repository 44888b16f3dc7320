"""
Statutory milestone schedule for a merger review.

One canonical ordered list holds every milestone; the Phase-1-only schedule
is the prefix selected by is_phase1_milestone, so it is always a subset of the
full schedule at identical offsets.
"""

from typing import List, Union

from mergerclock.conventions.types import PhaseOption

from .core import MilestoneDefinition, is_phase1_milestone

PHASE1_DETERMINATION = "Phase 1 determination"
PHASE2_DETERMINATION = "Phase 2 determination"

MILESTONES: List[MilestoneDefinition] = [
    MilestoneDefinition("Earliest date ACCC can clear transaction", 15),
    MilestoneDefinition("Final date for Phase 1 remedy proposals", 20),
    MilestoneDefinition(PHASE1_DETERMINATION, 30),
    MilestoneDefinition("ACCC issues notice of competition concerns", 55),
    MilestoneDefinition("Response to notice of competition concerns due", 80),
    MilestoneDefinition("Final date for Phase 2 remedy proposals", 90),
    MilestoneDefinition("Final date to provide information to ACCC", 105),
    MilestoneDefinition(PHASE2_DETERMINATION, 120),
]


def to_phase_option(value: Union[str, PhaseOption]) -> PhaseOption:
    """Accept either the enum or its string value ("phase1" / "phase1and2")."""
    if isinstance(value, PhaseOption):
        return value
    try:
        return PhaseOption(value)
    except ValueError:
        raise ValueError(
            f"Unknown phase option: {value!r}. "
            f"Available: {[p.value for p in PhaseOption]}"
        ) from None


def get_schedule(phase_option: Union[str, PhaseOption]) -> List[MilestoneDefinition]:
    """Return the ordered milestones for a phase option."""
    option = to_phase_option(phase_option)
    if option == PhaseOption.PHASE1:
        return [m for m in MILESTONES if is_phase1_milestone(m.business_day_offset)]
    return list(MILESTONES)


def is_phase_decision(name: str) -> bool:
    """True for the Phase 1 and Phase 2 determination milestones."""
    return PHASE1_DETERMINATION in name or PHASE2_DETERMINATION in name
