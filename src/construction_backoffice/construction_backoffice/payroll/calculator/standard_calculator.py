from __future__ import annotations

import logging
from typing import Sequence

from ...attendance.model import AttendanceRecord
from ...common.datetime_utils import days_in_month, month_date_strings
from ...common.validators import require_month
from ...core.constants import HALF_DAY_WEIGHT, PAYROLL_DAYS_PER_MONTH, PAYROLL_HOURS_PER_DAY
from ...core.enums import AttendanceStatus, MissingDayPolicy, OvertimeCategory
from ...employees.model import Employee
from ..model import AttendanceCounts, Deductions, OvertimeDetails, SalaryCalculationResult
from ..overtime import MULTIPLIERS, classify_overtime, is_weekend, overtime_hours
from .base import SalaryCalculator

logger = logging.getLogger(__name__)

_STATUS_BUCKETS = {
    AttendanceStatus.FULL_DAY: "full_days",
    AttendanceStatus.HALF_DAY: "half_days",
    AttendanceStatus.LEAVE: "leave_days",
    AttendanceStatus.SICK: "report_days",
    AttendanceStatus.ABSENT: "absent_days",
    AttendanceStatus.HOLIDAY: "holiday_days",
}

_HOURS_FIELDS = {
    OvertimeCategory.WEEKDAY: ("weekday_hours", "weekday_pay"),
    OvertimeCategory.WEEKEND: ("weekend_hours", "weekend_pay"),
    OvertimeCategory.HOLIDAY: ("holiday_hours", "holiday_pay"),
}


def _status_bucket(status) -> str | None:
    try:
        return _STATUS_BUCKETS.get(AttendanceStatus(status))
    except ValueError:
        return None


class StandardSalaryCalculator(SalaryCalculator):
    """Standard rule: monthly salary / 30 per day, / 8 per hour.

    Overtime pays 1.5x on weekdays and 2x on weekends and official holidays;
    a holiday that falls on a weekend counts as holiday. Half days deduct half
    a daily rate, absences a full one. The result is not floored at zero.
    """

    def __init__(self, *, missing_day_policy: MissingDayPolicy = MissingDayPolicy.UNKNOWN):
        self._missing_day_policy = MissingDayPolicy(missing_day_policy)

    def calculate(
        self,
        employee: Employee,
        records: Sequence[AttendanceRecord],
        year: int,
        month: int,
    ) -> SalaryCalculationResult:
        require_month(year, month)

        base_salary = employee.salary if employee.salary is not None else 0
        if base_salary <= 0:
            logger.warning("No valid salary for %s %s; calculating with %s", employee.name, employee.surname, base_salary)

        daily_rate = base_salary / PAYROLL_DAYS_PER_MONTH
        hourly_rate = daily_rate / PAYROLL_HOURS_PER_DAY

        by_date: dict[str, AttendanceRecord] = {}
        for r in records:
            by_date.setdefault(r.work_date, r)

        counts = dict.fromkeys(_STATUS_BUCKETS.values(), 0)
        overtime = {
            "weekday_hours": 0.0,
            "weekend_hours": 0.0,
            "holiday_hours": 0.0,
            "total_hours": 0.0,
            "weekday_pay": 0.0,
            "weekend_pay": 0.0,
            "holiday_pay": 0.0,
        }

        for date_str in month_date_strings(year, month):
            record = by_date.get(date_str)

            if record is None:
                if self._missing_day_policy is MissingDayPolicy.ABSENT and not is_weekend(date_str):
                    counts["absent_days"] += 1
                continue

            bucket = _status_bucket(record.status)
            if bucket:
                counts[bucket] += 1

            if record.has_overtime:
                hours = overtime_hours(record.overtime_start, record.overtime_end)
                if hours > 0:
                    category = classify_overtime(date_str, is_holiday=record.is_holiday)
                    hours_field, pay_field = _HOURS_FIELDS[category]
                    overtime["total_hours"] += hours
                    overtime[hours_field] += hours
                    overtime[pay_field] += hourly_rate * MULTIPLIERS[category] * hours

        attendance_counts = AttendanceCounts(
            **counts,
            total_working_days=counts["full_days"] + counts["half_days"] * HALF_DAY_WEIGHT,
            total_days_in_month=days_in_month(year, month),
        )
        overtime_details = OvertimeDetails(
            **overtime,
            total_overtime_pay=overtime["weekday_pay"] + overtime["weekend_pay"] + overtime["holiday_pay"],
        )

        half_day_deduction = (daily_rate / 2) * attendance_counts.half_days
        absent_day_deduction = daily_rate * attendance_counts.absent_days
        deductions = Deductions(
            half_day_deduction=half_day_deduction,
            absent_day_deduction=absent_day_deduction,
            total_deductions=half_day_deduction + absent_day_deduction,
        )

        calculated_salary = base_salary - deductions.total_deductions
        return SalaryCalculationResult(
            employee_id=employee.employee_id,
            employee_name=employee.name,
            employee_surname=employee.surname,
            base_salary=base_salary,
            month=month,
            year=year,
            attendance_counts=attendance_counts,
            overtime_details=overtime_details,
            deductions=deductions,
            calculated_salary=calculated_salary,
            total_payable=calculated_salary + overtime_details.total_overtime_pay,
        )
