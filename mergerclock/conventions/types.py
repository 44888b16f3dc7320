"""
Basic types and enums used across the timeline engine.
"""

from enum import Enum


class PhaseOption(Enum):
    """Anticipated review complexity, selecting which milestones are scheduled."""

    PHASE1 = "phase1"
    PHASE1_AND_2 = "phase1and2"


class CommitmentPhase(Enum):
    """Review phase in which commitments (remedies) are offered."""

    PHASE1 = "phase1"
    PHASE2 = "phase2"


class CalendarType(Enum):
    """Predefined calendars."""

    ACCC = "ACCC"
    WEEKEND = "WEEKEND"
