"""
Public holidays excluded from review-period business day counts.

The list is fixed at build time and covers the 2025-2027 window.
"""

from datetime import date
from typing import FrozenSet, List

from mergerclock.utils.date import to_date

HOLIDAY_STRINGS: List[str] = [
    "2025-01-01", "2025-01-26", "2025-04-06", "2025-04-07", "2025-04-09", "2025-04-25",
    "2025-06-09", "2025-08-25", "2025-10-06", "2025-12-23", "2025-12-24", "2025-12-25",
    "2025-12-26", "2025-12-27", "2025-12-28", "2025-12-30", "2025-12-31",
    "2026-01-01", "2026-01-26", "2026-04-03", "2026-04-04", "2026-04-06", "2026-04-25",
    "2026-06-08", "2026-08-24", "2026-10-05", "2026-12-23", "2026-12-24", "2026-12-25",
    "2026-12-26", "2026-12-27", "2026-12-28", "2026-12-30", "2026-12-31",
    "2027-01-01", "2027-01-26", "2027-04-07", "2027-04-08", "2027-04-10", "2027-04-25",
    "2027-06-14",
]

ACCC_HOLIDAYS: FrozenSet[date] = frozenset(to_date(h) for h in HOLIDAY_STRINGS)
