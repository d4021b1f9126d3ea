"""
Date helpers shared by the domain entities

The API sends GMT timestamps as 'yyyy-MM-dd'T'HH:mm:ss' strings with no
offset; they are kept as naive datetimes.
"""
from datetime import date, datetime
from typing import Any, Optional

DATE_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"


def parse_date_time(value: Any) -> Optional[datetime]:
    """Parse an API timestamp. Empty values map to None."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        # Raises ValueError, which pydantic reports as a validation error
        return datetime.strptime(value, DATE_TIME_FORMAT)
    raise ValueError(f"Unsupported date value: {value!r}")


def format_date_time(value: datetime) -> str:
    return value.strftime(DATE_TIME_FORMAT)


def format_stats_date(value: date, granularity: str) -> str:
    """
    Format the latest date to include in a stats query

    day -> 2018-06-23, week -> 2018-W25 (ISO week), month -> 2018-06, year -> 2018
    """
    if granularity == "day":
        return value.strftime("%Y-%m-%d")
    if granularity == "week":
        iso_year, iso_week, _ = value.isocalendar()
        return f"{iso_year}-W{iso_week:02d}"
    if granularity == "month":
        return value.strftime("%Y-%m")
    if granularity == "year":
        return value.strftime("%Y")
    raise ValueError(f"Unknown stats granularity: {granularity}")
