from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee (personel).

    Note: Plain data object; payroll reads ``salary`` but never mutates it.
    """

    employee_id: int
    name: str
    surname: str
    salary: Optional[float] = None
    department_id: Optional[int] = None
    position: Optional[str] = None
    is_active: bool = True
