from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_period, month_bounds
from ..common.validators import require_month, require_non_negative, require_period
from ..core.enums import PaymentMethod
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .calculator.base import SalaryCalculator
from .calculator.standard_calculator import StandardSalaryCalculator
from .model import SalaryCalculationResult
from .payment_model import NewSalaryPayment, SalarySummary
from .payment_repository import SalaryPaymentRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthlyPayrollReport:
    period: str
    rows: list[dict]
    totals: dict


class PayrollService:
    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        payments: SalaryPaymentRepository,
        *,
        calculator: Optional[SalaryCalculator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._payments = payments
        self._calculator = calculator or StandardSalaryCalculator()

    def calculate_for_employee(self, employee_id: int, year: int, month: int) -> SalaryCalculationResult:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Personel bulunamadı (ID: {employee_id})")
        return self._calculate(employee, year, month)

    def calculate_for_all(self, year: int, month: int) -> list[SalaryCalculationResult]:
        require_month(year, month)
        employees = sorted(self._employees.list_active(), key=lambda e: (e.surname, e.name))
        return [self._calculate(e, year, month) for e in employees]

    def build_month_report(self, year: int, month: int, *, employee_id: Optional[int] = None) -> MonthlyPayrollReport:
        if employee_id is not None:
            results = [self.calculate_for_employee(employee_id, year, month)]
        else:
            results = self.calculate_for_all(year, month)

        rows = []
        for r in results:
            rows.append(
                {
                    "employee_id": r.employee_id,
                    "full_name": f"{r.employee_name} {r.employee_surname}",
                    "base_salary": round(r.base_salary, 2),
                    "working_days": r.attendance_counts.total_working_days,
                    "absent_days": r.attendance_counts.absent_days,
                    "overtime_hours": round(r.overtime_details.total_hours, 2),
                    "overtime_pay": round(r.overtime_details.total_overtime_pay, 2),
                    "deductions": round(r.deductions.total_deductions, 2),
                    "total_payable": round(r.total_payable, 2),
                }
            )

        totals = {
            "employees": len(results),
            "overtime_pay": round(sum(r.overtime_details.total_overtime_pay for r in results), 2),
            "deductions": round(sum(r.deductions.total_deductions for r in results), 2),
            "total_payable": round(sum(r.total_payable for r in results), 2),
        }
        return MonthlyPayrollReport(period=format_period(year, month), rows=rows, totals=totals)

    def build_payment(
        self,
        result: SalaryCalculationResult,
        *,
        payment_date: date,
        bonus: float = 0.0,
        tax_deduction: float = 0.0,
        other_deductions: float = 0.0,
        payment_method: PaymentMethod = PaymentMethod.BANK_TRANSFER,
        notes: Optional[str] = None,
    ) -> NewSalaryPayment:
        """Turn a calculation into a payment draft.

        Net amount = calculated salary + overtime + bonus - tax - other
        deductions, floored at zero.
        """
        overtime = result.overtime_details
        income = result.calculated_salary + overtime.total_overtime_pay + bonus
        net_amount = income - (tax_deduction + other_deductions)

        return NewSalaryPayment(
            employee_id=result.employee_id,
            payment_date=payment_date,
            payment_period=format_period(result.year, result.month),
            base_salary=result.calculated_salary,
            overtime_pay=overtime.total_overtime_pay,
            bonus=bonus,
            tax_deduction=tax_deduction,
            other_deductions=other_deductions,
            net_amount=net_amount if net_amount > 0 else 0.0,
            payment_method=PaymentMethod(payment_method),
            notes=notes,
            weekday_overtime_pay=overtime.weekday_pay,
            weekend_overtime_pay=overtime.weekend_pay,
            holiday_overtime_pay=overtime.holiday_pay,
            attendance_details=result.attendance_counts,
        )

    def record_payment(self, payment: NewSalaryPayment) -> int:
        """Persist a payment.

        ``base_salary`` is the calculated salary and may be negative; only the
        net amount and the entered extras must be non-negative.
        """
        if not self._employees.get_by_id(payment.employee_id):
            raise NotFoundError(f"Personel bulunamadı (ID: {payment.employee_id})")

        require_period(payment.payment_period)
        require_non_negative(payment.net_amount, "Net maaş")
        for value, label in (
            (payment.overtime_pay, "Mesai ücreti"),
            (payment.bonus, "Prim miktarı"),
            (payment.tax_deduction, "Vergi kesintisi"),
            (payment.other_deductions, "Diğer kesintiler"),
        ):
            require_non_negative(value, label)

        try:
            PaymentMethod(payment.payment_method)
        except ValueError as e:
            raise ValidationError("Geçersiz ödeme yöntemi") from e

        payment_id = self._payments.create(payment)
        logger.info(
            "Salary payment %s recorded for employee %s (%s)", payment_id, payment.employee_id, payment.payment_period
        )
        return payment_id

    def salary_summary(self, employee_id: int) -> SalarySummary:
        payments = self._payments.list_for_employee(employee_id)
        if not payments:
            return SalarySummary(total_paid=0.0, average_monthly=0.0, last_payment=None)

        total_paid = sum(p.net_amount for p in payments)
        periods = {p.payment_period for p in payments}
        last_payment = max(payments, key=lambda p: (p.payment_date, p.payment_id))
        return SalarySummary(
            total_paid=total_paid,
            average_monthly=total_paid / len(periods),
            last_payment=last_payment,
        )

    def _calculate(self, employee: Employee, year: int, month: int) -> SalaryCalculationResult:
        require_month(year, month)
        start, end = month_bounds(year, month)
        records: Sequence = self._attendance.list_between(
            start_date=start, end_date=end, employee_id=employee.employee_id
        )
        return self._calculator.calculate(employee, records, year, month)
