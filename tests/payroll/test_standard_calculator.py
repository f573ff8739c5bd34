import logging

import pytest

from src.construction_backoffice.construction_backoffice.attendance.model import AttendanceRecord
from src.construction_backoffice.construction_backoffice.core.enums import AttendanceStatus, MissingDayPolicy
from src.construction_backoffice.construction_backoffice.core.exceptions import ValidationError
from src.construction_backoffice.construction_backoffice.employees.model import Employee
from src.construction_backoffice.construction_backoffice.payroll.calculator.standard_calculator import (
    StandardSalaryCalculator,
)


def _employee(salary):
    return Employee(employee_id=7, name="Ahmet", surname="Yılmaz", salary=salary)


def _record(work_date, status=AttendanceStatus.FULL_DAY, **kwargs):
    return AttendanceRecord(employee_id=7, work_date=work_date, status=status, **kwargs)


def test_full_month_of_full_days_pays_base_salary():
    # April 2024 has 30 days
    records = [_record(f"2024-04-{d:02d}") for d in range(1, 31)]

    result = StandardSalaryCalculator().calculate(_employee(3000), records, 2024, 4)

    assert result.attendance_counts.full_days == 30
    assert result.attendance_counts.total_working_days == 30
    assert result.attendance_counts.total_days_in_month == 30
    assert result.deductions.total_deductions == 0
    assert result.total_payable == 3000


def test_half_day_deducts_half_daily_rate():
    records = [_record("2024-04-03", AttendanceStatus.HALF_DAY)]

    result = StandardSalaryCalculator().calculate(_employee(3000), records, 2024, 4)

    assert result.deductions.half_day_deduction == 50
    assert result.attendance_counts.total_working_days == 0.5
    assert result.calculated_salary == 2950


def test_absent_day_deducts_daily_rate():
    records = [_record("2024-04-03", AttendanceStatus.ABSENT), _record("2024-04-04", AttendanceStatus.ABSENT)]

    result = StandardSalaryCalculator().calculate(_employee(3000), records, 2024, 4)

    assert result.deductions.absent_day_deduction == 200
    assert result.deductions.total_deductions == 200
    assert result.total_payable == 2800


def test_weekday_overtime_pays_one_and_a_half():
    # 2024-01-02 is a Tuesday; hourly rate = 2400 / 30 / 8 = 10
    records = [_record("2024-01-02", has_overtime=True, overtime_start="18:00", overtime_end="20:00")]

    result = StandardSalaryCalculator().calculate(_employee(2400), records, 2024, 1)

    assert result.overtime_details.weekday_hours == 2
    assert result.overtime_details.weekday_pay == 30
    assert result.overtime_details.total_overtime_pay == 30
    assert result.total_payable == 2430


def test_weekend_overtime_pays_double():
    records = [_record("2024-01-07", has_overtime=True, overtime_start="09:00", overtime_end="12:00")]

    result = StandardSalaryCalculator().calculate(_employee(2400), records, 2024, 1)

    assert result.overtime_details.weekend_hours == 3
    assert result.overtime_details.weekend_pay == 60
    assert result.overtime_details.weekday_pay == 0


def test_holiday_on_saturday_is_classified_as_holiday():
    records = [
        _record(
            "2024-01-06",
            AttendanceStatus.HOLIDAY,
            has_overtime=True,
            overtime_start="08:00",
            overtime_end="11:00",
            is_holiday=True,
        )
    ]

    result = StandardSalaryCalculator().calculate(_employee(2400), records, 2024, 1)

    assert result.overtime_details.holiday_hours == 3
    assert result.overtime_details.holiday_pay == 60
    assert result.overtime_details.weekend_hours == 0
    assert result.overtime_details.weekend_pay == 0
    assert result.attendance_counts.holiday_days == 1


def test_overtime_flag_without_times_adds_nothing():
    records = [_record("2024-01-02", has_overtime=True)]
    result = StandardSalaryCalculator().calculate(_employee(2400), records, 2024, 1)
    assert result.overtime_details.total_hours == 0


def test_times_without_overtime_flag_are_ignored():
    records = [_record("2024-01-02", overtime_start="18:00", overtime_end="20:00")]
    result = StandardSalaryCalculator().calculate(_employee(2400), records, 2024, 1)
    assert result.overtime_details.total_overtime_pay == 0


def test_status_buckets_and_unknown_codes():
    records = [
        _record("2024-01-02", AttendanceStatus.LEAVE),
        _record("2024-01-03", AttendanceStatus.SICK),
        _record("2024-01-04", AttendanceStatus.HOLIDAY),
        _record("2024-01-05", "M"),
    ]

    counts = StandardSalaryCalculator().calculate(_employee(3000), records, 2024, 1).attendance_counts

    assert (counts.leave_days, counts.report_days, counts.holiday_days) == (1, 1, 1)
    assert counts.full_days == counts.half_days == counts.absent_days == 0


def test_records_outside_month_are_ignored():
    records = [_record("2024-02-01"), _record("2024-01-15")]
    result = StandardSalaryCalculator().calculate(_employee(3000), records, 2024, 1)
    assert result.attendance_counts.full_days == 1


def test_first_record_wins_for_duplicate_dates():
    records = [_record("2024-01-15", AttendanceStatus.ABSENT), _record("2024-01-15")]
    result = StandardSalaryCalculator().calculate(_employee(3000), records, 2024, 1)
    assert result.attendance_counts.absent_days == 1
    assert result.attendance_counts.full_days == 0


def test_missing_days_are_not_counted_by_default():
    result = StandardSalaryCalculator().calculate(_employee(3000), [], 2024, 1)
    assert result.attendance_counts.absent_days == 0
    assert result.total_payable == 3000


def test_absent_policy_counts_missing_weekdays_only():
    # January 2024: 23 weekdays; one of them has a record
    calc = StandardSalaryCalculator(missing_day_policy=MissingDayPolicy.ABSENT)
    result = calc.calculate(_employee(3000), [_record("2024-01-02")], 2024, 1)
    assert result.attendance_counts.absent_days == 22


def test_many_absences_can_make_salary_negative():
    records = [_record(f"2024-01-{d:02d}", AttendanceStatus.ABSENT) for d in range(1, 32)]
    result = StandardSalaryCalculator().calculate(_employee(3000), records, 2024, 1)
    assert result.calculated_salary == -100
    assert result.total_payable < 0


def test_missing_salary_warns_and_yields_zero(caplog):
    records = [_record("2024-01-02", AttendanceStatus.HALF_DAY, has_overtime=True, overtime_start="18:00", overtime_end="20:00")]

    with caplog.at_level(logging.WARNING):
        result = StandardSalaryCalculator().calculate(_employee(None), records, 2024, 1)

    assert result.base_salary == 0
    assert result.total_payable == 0
    assert result.attendance_counts.half_days == 1
    assert any("No valid salary" in r.getMessage() for r in caplog.records)


def test_calculation_is_repeatable():
    records = [
        _record("2024-01-02", has_overtime=True, overtime_start="17:30", overtime_end="19:10"),
        _record("2024-01-03", AttendanceStatus.HALF_DAY),
        _record("2024-01-06", has_overtime=True, overtime_start="22:00", overtime_end="01:15", is_holiday=True),
    ]
    calc = StandardSalaryCalculator()

    first = calc.calculate(_employee(3175.5), records, 2024, 1)
    second = calc.calculate(_employee(3175.5), records, 2024, 1)

    assert first == second
    assert first.as_dict() == second.as_dict()


def test_result_carries_identity_and_period():
    result = StandardSalaryCalculator().calculate(_employee(3000), [], 2024, 2)
    assert (result.employee_id, result.employee_name, result.employee_surname) == (7, "Ahmet", "Yılmaz")
    assert (result.year, result.month) == (2024, 2)
    assert result.attendance_counts.total_days_in_month == 29


@pytest.mark.parametrize("month", [0, 13])
def test_month_out_of_range_is_rejected(month):
    with pytest.raises(ValidationError):
        StandardSalaryCalculator().calculate(_employee(3000), [], 2024, month)
