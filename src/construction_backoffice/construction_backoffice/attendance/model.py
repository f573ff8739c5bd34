from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one puantaj entry per (employee, day).

    ``work_date`` is kept as a YYYY-MM-DD string; payroll matches records by
    exact string equality.

    Rows loaded from the database may carry a status code outside
    ``AttendanceStatus`` as a raw string; payroll ignores those.
    """

    employee_id: int
    work_date: str
    status: AttendanceStatus
    has_overtime: bool = False
    overtime_start: Optional[str] = None
    overtime_end: Optional[str] = None
    is_holiday: bool = False
    notes: Optional[str] = None
    attendance_id: Optional[int] = None
