from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..common.datetime_utils import format_iso_date
from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, mysql_time_to_clock
from .model import AttendanceRecord
from .repository import AttendanceRepository

_SELECT = """
    SELECT attendance_id, employee_id, work_date, status, has_overtime,
           overtime_start, overtime_end, is_holiday, notes
    FROM attendance_records
"""


def _to_status(value: str):
    # Codes outside the known set stay raw strings; payroll skips them.
    try:
        return AttendanceStatus(value)
    except ValueError:
        return value


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    work_date = r["work_date"]
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        work_date=format_iso_date(work_date) if isinstance(work_date, date) else str(work_date),
        status=_to_status(r["status"]),
        has_overtime=bool(r.get("has_overtime")),
        overtime_start=mysql_time_to_clock(r.get("overtime_start")),
        overtime_end=mysql_time_to_clock(r.get("overtime_end")),
        is_holiday=bool(r.get("is_holiday")),
        notes=r.get("notes"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE attendance_id=%s", (int(attendance_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def get_for_employee_and_date(self, employee_id: int, work_date: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE employee_id=%s AND work_date=%s", (int(employee_id), work_date))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_between(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[int] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses = ["work_date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE " + " AND ".join(clauses) + " ORDER BY work_date ASC, employee_id ASC",
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def create(self, record: AttendanceRecord) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(
                    employee_id, work_date, status, has_overtime,
                    overtime_start, overtime_end, is_holiday, notes
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    record.employee_id,
                    record.work_date,
                    record.status.value,
                    int(record.has_overtime),
                    record.overtime_start,
                    record.overtime_end,
                    int(record.is_holiday),
                    record.notes,
                ),
            )
            return int(cur.lastrowid)

    def update(self, record: AttendanceRecord) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET employee_id=%s, work_date=%s, status=%s, has_overtime=%s,
                    overtime_start=%s, overtime_end=%s, is_holiday=%s, notes=%s
                WHERE attendance_id=%s
                """,
                (
                    record.employee_id,
                    record.work_date,
                    record.status.value,
                    int(record.has_overtime),
                    record.overtime_start,
                    record.overtime_end,
                    int(record.is_holiday),
                    record.notes,
                    int(record.attendance_id),
                ),
            )
            return cur.rowcount > 0

    def delete(self, attendance_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE attendance_id=%s", (int(attendance_id),))
            return cur.rowcount > 0
