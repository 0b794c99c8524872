from __future__ import annotations

from datetime import date, datetime

from pydantic import TypeAdapter

DATE_FORMAT = "%Y-%m-%d"

_DATE = TypeAdapter(date)
_DATETIME = TypeAdapter(datetime)


def format_date(value: date | datetime | str) -> str:
    """Render a date-like value as YYYY-MM-DD."""
    if isinstance(value, datetime):
        return value.date().strftime(DATE_FORMAT)
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)
    if isinstance(value, str):
        return parse_date(value).strftime(DATE_FORMAT)
    raise TypeError(f"Expected date, datetime or ISO string, got {type(value).__name__}")


def parse_date(s: str) -> date:
    """Parse '2020-01-01' or an ISO timestamp like '2020-01-01T10:15:00.000Z' to its calendar date."""
    s = s.strip()
    if len(s) == 10:
        return _DATE.validate_python(s)
    return _DATETIME.validate_python(s).date()
