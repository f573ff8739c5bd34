from datetime import date, time, timedelta

import pytest

from src.construction_backoffice.construction_backoffice.attendance.mysql_attendance_repository import _to_record
from src.construction_backoffice.construction_backoffice.core.enums import AttendanceStatus
from src.construction_backoffice.construction_backoffice.database.mysql_base import mysql_time_to_clock
from src.construction_backoffice.construction_backoffice.employees.model import Employee
from src.construction_backoffice.construction_backoffice.payroll.calculator.standard_calculator import (
    StandardSalaryCalculator,
)


def _row(**overrides):
    row = {
        "attendance_id": 3,
        "employee_id": 7,
        "work_date": date(2024, 1, 2),
        "status": "G",
        "has_overtime": 1,
        "overtime_start": timedelta(hours=18),
        "overtime_end": timedelta(hours=20, minutes=30),
        "is_holiday": 0,
        "notes": None,
    }
    row.update(overrides)
    return row


def test_row_maps_to_record():
    record = _to_record(_row())

    assert record.work_date == "2024-01-02"
    assert record.status == AttendanceStatus.FULL_DAY
    assert (record.overtime_start, record.overtime_end) == ("18:00", "20:30")
    assert record.has_overtime is True
    assert record.is_holiday is False


def test_unknown_status_code_is_kept_and_skipped_by_payroll():
    record = _to_record(_row(status="M", has_overtime=0, overtime_start=None, overtime_end=None))
    assert record.status == "M"

    employee = Employee(employee_id=7, name="Ahmet", surname="Yılmaz", salary=3000)
    result = StandardSalaryCalculator().calculate(employee, [record], 2024, 1)

    assert result.attendance_counts.full_days == 0
    assert result.total_payable == 3000


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, None),
        (time(7, 45, 12), "07:45"),
        (timedelta(hours=22, minutes=5, seconds=30), "22:05"),
        ("09:30:00", "09:30"),
    ],
)
def test_mysql_time_to_clock(value, expected):
    assert mysql_time_to_clock(value) == expected
