from typing import Optional, Union
from datetime import datetime, date
from pandas import Timestamp

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[str, date, datetime, Timestamp]


def to_date(date_like: DateLike) -> date:
    """
    Normalize a string, Timestamp or datetime to a plain date.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like.strip(), fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def to_optional_date(date_like: Optional[DateLike]) -> Optional[date]:
    """Like to_date, but passes None (and empty strings) through as None."""
    if date_like is None or date_like == "":
        return None
    return to_date(date_like)


def datetime_to_str(datetime_date: DateLike) -> str:
    """
    Format a date-like into 'YYYY-MM-DD' string.
    """
    return to_date(datetime_date).strftime(DATE_FMT)


def weekday_name(date_like: DateLike) -> str:
    """Full English weekday name, e.g. 'Monday'."""
    return to_date(date_like).strftime("%A")
