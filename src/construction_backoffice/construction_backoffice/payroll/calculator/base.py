from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...attendance.model import AttendanceRecord
from ...employees.model import Employee
from ..model import SalaryCalculationResult


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(
        self,
        employee: Employee,
        records: Sequence[AttendanceRecord],
        year: int,
        month: int,
    ) -> SalaryCalculationResult:
        raise NotImplementedError
