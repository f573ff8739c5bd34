from __future__ import annotations

import calendar
import re
from datetime import date, datetime
from typing import Iterator

from ..core.constants import CLOCK_EPOCH, CLOCK_FORMAT, DATE_FORMAT, PERIOD_FORMAT

CLOCK_RE = re.compile(r"^\d{2}:\d{2}$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def format_iso_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def parse_clock(value: str) -> datetime:
    """Parse an HH:MM clock time onto the fixed epoch date.

    Only the zero-padded form is accepted; "8:5" raises ValueError.
    """
    if not isinstance(value, str) or not CLOCK_RE.match(value):
        raise ValueError(f"Invalid clock time: {value!r}")
    return datetime.strptime(f"{CLOCK_EPOCH} {value}", f"{DATE_FORMAT} {CLOCK_FORMAT}")


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_date_strings(year: int, month: int) -> Iterator[str]:
    """Yield every day of the month as YYYY-MM-DD."""
    for day in range(1, days_in_month(year, month) + 1):
        yield f"{year}-{month:02d}-{day:02d}"


def month_bounds(year: int, month: int) -> tuple[date, date]:
    return date(year, month, 1), date(year, month, days_in_month(year, month))


def format_period(year: int, month: int) -> str:
    return date(year, month, 1).strftime(PERIOD_FORMAT)
