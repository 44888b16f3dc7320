"""
Merger record schemas.
"""

from .enums import MergerOutcome, MergerStatus
from .records import Merger, MergerRecord, convert_to_merger, convert_to_record

__all__ = [
    "MergerStatus",
    "MergerOutcome",
    "MergerRecord",
    "Merger",
    "convert_to_merger",
    "convert_to_record",
]
