from .core import PHASE1_DETERMINATION_OFFSET, MilestoneDefinition, is_phase1_milestone
from .milestones import (
    MILESTONES,
    PHASE1_DETERMINATION,
    PHASE2_DETERMINATION,
    get_schedule,
    is_phase_decision,
    to_phase_option,
)

__all__ = [
    "MilestoneDefinition",
    "MILESTONES",
    "PHASE1_DETERMINATION",
    "PHASE2_DETERMINATION",
    "PHASE1_DETERMINATION_OFFSET",
    "get_schedule",
    "is_phase1_milestone",
    "is_phase_decision",
    "to_phase_option",
]
