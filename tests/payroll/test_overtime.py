import calendar
import logging

import pytest

from src.construction_backoffice.construction_backoffice.core.enums import OvertimeCategory
from src.construction_backoffice.construction_backoffice.payroll.overtime import (
    classify_overtime,
    is_weekend,
    overtime_hours,
    parse_overtime_hours,
    parse_weekend,
)


@pytest.mark.parametrize(
    "start,end,expected",
    [
        ("18:00", "20:00", 2.0),
        ("08:15", "09:45", 1.5),
        ("00:00", "23:30", 23.5),
    ],
)
def test_same_day_interval_is_plain_difference(start, end, expected):
    assert overtime_hours(start, end) == expected


def test_overnight_interval_wraps_past_midnight():
    assert overtime_hours("22:00", "02:00") == 4.0


def test_equal_start_and_end_counts_as_full_day():
    assert overtime_hours("18:00", "18:00") == 24.0


@pytest.mark.parametrize("start,end", [(None, "20:00"), ("18:00", None), ("", ""), (None, None)])
def test_missing_times_mean_no_overtime(start, end):
    result = parse_overtime_hours(start, end)
    assert result.ok
    assert overtime_hours(start, end) == 0.0


def test_unparseable_time_is_reported_then_defaulted(caplog):
    result = parse_overtime_hours("25:00", "26:00")
    assert not result.ok
    assert result.value_or(0.0) == 0.0

    with caplog.at_level(logging.WARNING):
        assert overtime_hours("18:xx", "20:00") == 0.0
    assert any("Overtime duration defaulted" in r.getMessage() for r in caplog.records)


def test_weekend_flags_across_january_2024():
    # 2024-01-01 is a Monday
    for day in range(1, calendar.monthrange(2024, 1)[1] + 1):
        expected = calendar.weekday(2024, 1, day) in (5, 6)
        assert is_weekend(f"2024-01-{day:02d}") is expected

    assert is_weekend("2024-01-06") is True
    assert is_weekend("2024-01-07") is True
    assert is_weekend("2024-01-08") is False


def test_bad_date_is_not_weekend(caplog):
    assert not parse_weekend("2024-13-40").ok
    with caplog.at_level(logging.WARNING):
        assert is_weekend("not-a-date") is False
    assert any("Weekend check defaulted" in r.getMessage() for r in caplog.records)


def test_holiday_wins_over_weekend():
    assert classify_overtime("2024-01-06", is_holiday=True) == OvertimeCategory.HOLIDAY
    assert classify_overtime("2024-01-06", is_holiday=False) == OvertimeCategory.WEEKEND
    assert classify_overtime("2024-01-03", is_holiday=False) == OvertimeCategory.WEEKDAY


@pytest.mark.parametrize("start,end", [("8:5", "10:00"), ("18:00", "2:00"), ("18:00:00", "20:00")])
def test_clock_times_must_be_zero_padded_hh_mm(start, end):
    assert not parse_overtime_hours(start, end).ok
    assert overtime_hours(start, end) == 0.0
