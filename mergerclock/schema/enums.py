"""
Status and outcome enumerations for stored merger records.
"""

from enum import Enum


class MergerStatus(Enum):
    """Status labels persisted on merger records."""

    PHASE_1 = "Phase 1"
    PHASE_2 = "Phase 2"
    CLOCK_STOPPED = "Clock stopped"
    WITHDRAWN = "Withdrawn"
    CLEARED = "Cleared"
    BLOCKED = "Blocked"
    CLEARED_WITH_COMMITMENTS = "Cleared (with commitments)"

    @property
    def is_decided(self) -> bool:
        return self in _DECIDED


class MergerOutcome(Enum):
    """Outcome shown on the dashboard."""

    UNDER_REVIEW = "under_review"
    CLEARED = "cleared"
    BLOCKED = "blocked"
    CLEARED_WITH_COMMITMENTS = "cleared_with_commitments"


_DECIDED = {
    MergerStatus.WITHDRAWN,
    MergerStatus.CLEARED,
    MergerStatus.BLOCKED,
    MergerStatus.CLEARED_WITH_COMMITMENTS,
}

STATUS_TO_OUTCOME = {
    MergerStatus.PHASE_1: MergerOutcome.UNDER_REVIEW,
    MergerStatus.PHASE_2: MergerOutcome.UNDER_REVIEW,
    MergerStatus.CLOCK_STOPPED: MergerOutcome.UNDER_REVIEW,
    MergerStatus.WITHDRAWN: MergerOutcome.BLOCKED,
    MergerStatus.CLEARED: MergerOutcome.CLEARED,
    MergerStatus.BLOCKED: MergerOutcome.BLOCKED,
    MergerStatus.CLEARED_WITH_COMMITMENTS: MergerOutcome.CLEARED_WITH_COMMITMENTS,
}

OUTCOME_TO_STATUS = {
    MergerOutcome.UNDER_REVIEW: MergerStatus.PHASE_1,
    MergerOutcome.CLEARED: MergerStatus.CLEARED,
    MergerOutcome.BLOCKED: MergerStatus.BLOCKED,
    MergerOutcome.CLEARED_WITH_COMMITMENTS: MergerStatus.CLEARED_WITH_COMMITMENTS,
}
