"""Overtime duration, weekend and rate-category rules.

The ``parse_*`` functions return a :class:`ParseResult`; the plain helpers
resolve failures to the documented defaults (0 hours / not weekend) and log
them.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Optional

from ..common.datetime_utils import parse_clock, parse_iso_date
from ..common.result import ParseResult
from ..core.constants import (
    HOLIDAY_OVERTIME_MULTIPLIER,
    WEEKDAY_OVERTIME_MULTIPLIER,
    WEEKEND_OVERTIME_MULTIPLIER,
)
from ..core.enums import OvertimeCategory

logger = logging.getLogger(__name__)

MULTIPLIERS = {
    OvertimeCategory.WEEKDAY: WEEKDAY_OVERTIME_MULTIPLIER,
    OvertimeCategory.WEEKEND: WEEKEND_OVERTIME_MULTIPLIER,
    OvertimeCategory.HOLIDAY: HOLIDAY_OVERTIME_MULTIPLIER,
}


def parse_overtime_hours(start: Optional[str], end: Optional[str]) -> ParseResult[float]:
    if not start or not end:
        return ParseResult.success(0.0)

    try:
        start_time = parse_clock(start)
        end_time = parse_clock(end)
    except (TypeError, ValueError) as e:
        return ParseResult.failure(f"invalid overtime clock {start!r}-{end!r}: {e}")

    # Shift crosses midnight.
    if end_time <= start_time:
        end_time += timedelta(days=1)

    return ParseResult.success((end_time - start_time).total_seconds() / 3600)


def overtime_hours(start: Optional[str], end: Optional[str]) -> float:
    """Elapsed overtime hours between two HH:MM times, 0.0 when unknown."""
    result = parse_overtime_hours(start, end)
    if not result.ok:
        logger.warning("Overtime duration defaulted to 0: %s", result.error)
    return result.value_or(0.0)


def parse_weekend(date_string: str) -> ParseResult[bool]:
    try:
        weekday = parse_iso_date(date_string).weekday()
    except (TypeError, ValueError) as e:
        return ParseResult.failure(f"invalid date {date_string!r}: {e}")
    return ParseResult.success(weekday >= 5)


def is_weekend(date_string: str) -> bool:
    """True for Saturday and Sunday."""
    result = parse_weekend(date_string)
    if not result.ok:
        logger.warning("Weekend check defaulted to False: %s", result.error)
    return result.value_or(False)


def classify_overtime(date_string: str, *, is_holiday: bool) -> OvertimeCategory:
    if is_holiday:
        return OvertimeCategory.HOLIDAY
    if is_weekend(date_string):
        return OvertimeCategory.WEEKEND
    return OvertimeCategory.WEEKDAY
