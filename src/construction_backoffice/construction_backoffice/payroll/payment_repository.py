from __future__ import annotations

from typing import Protocol, Sequence

from .payment_model import NewSalaryPayment, SalaryPayment


class SalaryPaymentRepository(Protocol):
    def create(self, payment: NewSalaryPayment) -> int:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[SalaryPayment]:
        """Payments of one employee, newest payment_date first."""
        raise NotImplementedError
