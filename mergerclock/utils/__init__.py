from .date import to_date, datetime_to_str, weekday_name

__all__ = ["to_date", "datetime_to_str", "weekday_name"]
