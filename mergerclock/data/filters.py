"""
Merger record filtering strategies.
"""

from datetime import date
from typing import Iterable, List, Optional, Union

from mergerclock.schema.enums import MergerStatus
from mergerclock.schema.records import MergerRecord

from .base import BaseFilter


class StatusFilter(BaseFilter):
    """Keep records whose current status is one of the given labels."""

    def __init__(self, statuses: Iterable[Union[str, MergerStatus]]):
        self.statuses = {getattr(s, "value", s) for s in statuses}

    @classmethod
    def under_review(cls) -> "StatusFilter":
        return cls([MergerStatus.PHASE_1, MergerStatus.PHASE_2, MergerStatus.CLOCK_STOPPED])

    def filter(self, records: List[MergerRecord]) -> List[MergerRecord]:
        return [r for r in records if r.current_status in self.statuses]


class IndustryFilter(BaseFilter):
    """Keep records in the given industry (case-insensitive)."""

    def __init__(self, industry: str):
        self.industry = industry.lower()

    def filter(self, records: List[MergerRecord]) -> List[MergerRecord]:
        return [r for r in records if (r.industry or "").lower() == self.industry]


class FiledBetweenFilter(BaseFilter):
    """
    Filter records by filing date range.

    Either bound may be None for an open range; both bounds are inclusive.
    """

    def __init__(self, start: Optional[date] = None, end: Optional[date] = None):
        self.start = start
        self.end = end

    def filter(self, records: List[MergerRecord]) -> List[MergerRecord]:
        result = records

        if self.start is not None:
            result = [r for r in result if r.filing_date >= self.start]

        if self.end is not None:
            result = [r for r in result if r.filing_date <= self.end]

        return result
