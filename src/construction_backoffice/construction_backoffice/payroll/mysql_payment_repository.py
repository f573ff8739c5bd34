from __future__ import annotations

import json
from dataclasses import asdict
from typing import Sequence

from ..core.enums import PaymentMethod
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .payment_model import NewSalaryPayment, SalaryPayment
from .payment_repository import SalaryPaymentRepository


class MySQLSalaryPaymentRepository(SalaryPaymentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, payment: NewSalaryPayment) -> int:
        details = json.dumps(asdict(payment.attendance_details)) if payment.attendance_details else None
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO salary_payments(
                    employee_id, payment_date, payment_period, base_salary, overtime_pay, bonus,
                    tax_deduction, other_deductions, net_amount, payment_method, notes,
                    weekday_overtime_pay, weekend_overtime_pay, holiday_overtime_pay, attendance_details
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    payment.employee_id,
                    payment.payment_date,
                    payment.payment_period,
                    payment.base_salary,
                    payment.overtime_pay,
                    payment.bonus,
                    payment.tax_deduction,
                    payment.other_deductions,
                    payment.net_amount,
                    PaymentMethod(payment.payment_method).value,
                    payment.notes,
                    payment.weekday_overtime_pay,
                    payment.weekend_overtime_pay,
                    payment.holiday_overtime_pay,
                    details,
                ),
            )
            return int(cur.lastrowid)

    def list_for_employee(self, employee_id: int) -> Sequence[SalaryPayment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT payment_id, employee_id, payment_date, payment_period, base_salary, overtime_pay,
                       bonus, tax_deduction, other_deductions, net_amount, payment_method, notes, created_at
                FROM salary_payments
                WHERE employee_id=%s
                ORDER BY payment_date DESC, payment_id DESC
                """,
                (int(employee_id),),
            )
            return [
                SalaryPayment(
                    payment_id=int(r["payment_id"]),
                    employee_id=int(r["employee_id"]),
                    payment_date=r["payment_date"],
                    payment_period=r["payment_period"],
                    base_salary=float(r["base_salary"]),
                    overtime_pay=float(r["overtime_pay"] or 0),
                    bonus=float(r["bonus"] or 0),
                    tax_deduction=float(r["tax_deduction"] or 0),
                    other_deductions=float(r["other_deductions"] or 0),
                    net_amount=float(r["net_amount"]),
                    payment_method=PaymentMethod(r["payment_method"]),
                    notes=r.get("notes"),
                    created_at=r.get("created_at"),
                )
                for r in fetchall(cur)
            ]
