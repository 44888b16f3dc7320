from .date_utils import (
    add_business_days,
    business_days_between,
    get_default_calendar,
    is_business_day,
    set_default_calendar,
    subtract_business_days,
)

__all__ = [
    "add_business_days",
    "subtract_business_days",
    "business_days_between",
    "is_business_day",
    "get_default_calendar",
    "set_default_calendar",
]
