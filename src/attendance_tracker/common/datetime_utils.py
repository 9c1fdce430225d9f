from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

from ..core.constants import DATE_FORMAT, TIME_FORMAT
from ..core.exceptions import DateFormatError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError:
        raise DateFormatError(f"Invalid date '{value}'. Use YYYY-MM-DD.") from None


def resolve_day(value: Union[date, str, None], *, today: Optional[date] = None) -> date:
    """Accept a date, an ISO string or a blank value meaning today."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if value is None or not value.strip():
        return today or now_local().date()
    return parse_iso_date(value)


def format_time(moment: datetime) -> str:
    return moment.strftime(TIME_FORMAT)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now()
