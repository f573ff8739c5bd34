from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class AttendanceCounts:
    """Day counts per puantaj status for one month."""

    full_days: int = 0
    half_days: int = 0
    leave_days: int = 0
    report_days: int = 0
    absent_days: int = 0
    holiday_days: int = 0
    total_working_days: float = 0.0
    total_days_in_month: int = 0


@dataclass(frozen=True)
class OvertimeDetails:
    weekday_hours: float = 0.0
    weekend_hours: float = 0.0
    holiday_hours: float = 0.0
    total_hours: float = 0.0
    weekday_pay: float = 0.0
    weekend_pay: float = 0.0
    holiday_pay: float = 0.0
    total_overtime_pay: float = 0.0


@dataclass(frozen=True)
class Deductions:
    half_day_deduction: float = 0.0
    absent_day_deduction: float = 0.0
    total_deductions: float = 0.0


@dataclass(frozen=True)
class SalaryCalculationResult:
    """Derived, never persisted. Built fresh on every calculation."""

    employee_id: int
    employee_name: str
    employee_surname: str
    base_salary: float
    month: int
    year: int
    attendance_counts: AttendanceCounts
    overtime_details: OvertimeDetails
    deductions: Deductions
    calculated_salary: float
    total_payable: float

    def as_dict(self) -> dict:
        return asdict(self)
