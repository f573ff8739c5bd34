from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import PaymentMethod
from .model import AttendanceCounts


@dataclass(frozen=True)
class NewSalaryPayment:
    """A payment ready to be recorded (maaş ödemesi)."""

    employee_id: int
    payment_date: date
    payment_period: str
    base_salary: float
    net_amount: float
    overtime_pay: float = 0.0
    bonus: float = 0.0
    tax_deduction: float = 0.0
    other_deductions: float = 0.0
    payment_method: PaymentMethod = PaymentMethod.BANK_TRANSFER
    notes: Optional[str] = None
    weekday_overtime_pay: float = 0.0
    weekend_overtime_pay: float = 0.0
    holiday_overtime_pay: float = 0.0
    attendance_details: Optional[AttendanceCounts] = None


@dataclass(frozen=True)
class SalaryPayment:
    payment_id: int
    employee_id: int
    payment_date: date
    payment_period: str
    base_salary: float
    overtime_pay: float
    bonus: float
    tax_deduction: float
    other_deductions: float
    net_amount: float
    payment_method: PaymentMethod
    notes: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class SalarySummary:
    total_paid: float
    average_monthly: float
    last_payment: Optional[SalaryPayment] = None
