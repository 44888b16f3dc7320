"""
Core data structures for milestone schedules.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MilestoneDefinition:
    """A statutory milestone, due a number of business days after filing."""

    name: str
    business_day_offset: int

    @property
    def is_phase1(self) -> bool:
        return is_phase1_milestone(self.business_day_offset)


PHASE1_DETERMINATION_OFFSET = 30


def is_phase1_milestone(offset: int) -> bool:
    """Milestones up to and including the Phase 1 determination belong to Phase 1."""
    return offset <= PHASE1_DETERMINATION_OFFSET
