from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_SELECT = """
    SELECT employee_id, name, surname, salary, department_id, position, is_active
    FROM employees
"""


def _to_employee(row: Dict[str, Any]) -> Employee:
    salary = row.get("salary")
    return Employee(
        employee_id=int(row["employee_id"]),
        name=row["name"],
        surname=row["surname"],
        salary=float(salary) if salary is not None else None,
        department_id=row.get("department_id"),
        position=row.get("position"),
        is_active=bool(row.get("is_active", True)),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE employee_id=%s", (int(employee_id),))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE is_active=1 ORDER BY surname, name")
            return [_to_employee(r) for r in fetchall(cur)]
