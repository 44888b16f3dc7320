"""
Merger record schemas and conversions between the stored row and the
dashboard view.
"""

from dataclasses import asdict, dataclass, fields
from datetime import date
from typing import Dict, Optional

from mergerclock.utils.date import datetime_to_str, to_date, to_optional_date

from .enums import OUTCOME_TO_STATUS, STATUS_TO_OUTCOME, MergerOutcome, MergerStatus


@dataclass
class MergerRecord:
    """A merger row as persisted by the record store."""

    id: str
    acquirer: str
    target: str
    industry: str
    filing_date: date
    current_status: str = MergerStatus.PHASE_1.value
    status_date: Optional[date] = None
    name: Optional[str] = None
    description: Optional[str] = None
    is_followed: bool = False
    has_phase_2: bool = False

    def __post_init__(self):
        self.filing_date = to_date(self.filing_date)
        self.status_date = to_optional_date(self.status_date)
        if self.name is None:
            self.name = f"{self.target} / {self.acquirer}"

    @classmethod
    def from_dict(cls, data: Dict) -> "MergerRecord":
        """Build a record from a stored mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> Dict:
        data = asdict(self)
        data["filing_date"] = datetime_to_str(self.filing_date)
        data["status_date"] = datetime_to_str(self.status_date) if self.status_date else None
        return data

    @property
    def status(self) -> Optional[MergerStatus]:
        try:
            return MergerStatus(self.current_status)
        except ValueError:
            return None


@dataclass
class Merger:
    """Dashboard view of a merger."""

    id: str
    target: str
    acquirer: str
    name: str
    industry: str
    start_date: date
    outcome: MergerOutcome
    end_date: Optional[date] = None
    description: str = ""
    is_followed: bool = False
    last_event: Optional[str] = None
    has_phase_2: bool = False


def convert_to_merger(record: MergerRecord) -> Merger:
    status = record.status
    decided = status is not None and status.is_decided
    return Merger(
        id=record.id,
        target=record.target,
        acquirer=record.acquirer,
        name=f"{record.target} / {record.acquirer}",
        industry=record.industry,
        start_date=record.filing_date,
        outcome=STATUS_TO_OUTCOME.get(status, MergerOutcome.UNDER_REVIEW),
        end_date=record.status_date if decided else None,
        description=record.description or "",
        is_followed=record.is_followed,
        last_event=record.current_status,
        has_phase_2=record.has_phase_2 or status == MergerStatus.PHASE_2,
    )


def convert_to_record(merger: Merger) -> MergerRecord:
    status = OUTCOME_TO_STATUS[merger.outcome]
    # An undecided merger already in Phase 2 is stored with that label
    if merger.has_phase_2 and merger.outcome == MergerOutcome.UNDER_REVIEW:
        status = MergerStatus.PHASE_2
    return MergerRecord(
        id=merger.id,
        acquirer=merger.acquirer,
        target=merger.target,
        industry=merger.industry,
        filing_date=merger.start_date,
        current_status=status.value,
        status_date=merger.end_date,
        name=merger.name,
        description=merger.description or None,
        is_followed=merger.is_followed,
        has_phase_2=merger.has_phase_2,
    )
