from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from ..common.datetime_utils import month_bounds, parse_iso_date
from ..common.validators import require_clock, require_iso_date, require_month, require_status
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = frozenset(
    {
        "employee_id",
        "work_date",
        "status",
        "has_overtime",
        "overtime_start",
        "overtime_end",
        "is_holiday",
        "notes",
    }
)


class AttendanceService:
    """Puantaj entry, correction and lookup.

    One record per (employee, day): saving a day that already has a record
    updates it in place.
    """

    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def save_attendance(
        self,
        *,
        employee_id: int,
        work_date: str,
        status,
        has_overtime: bool = False,
        overtime_start: Optional[str] = None,
        overtime_end: Optional[str] = None,
        is_holiday: bool = False,
        notes: Optional[str] = None,
    ) -> tuple[AttendanceRecord, bool]:
        """Create or update the record for (employee, day).

        Returns the stored record and whether it was newly created.
        """
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError(f"Personel bulunamadı (ID: {employee_id})")

        record = self._normalize(
            AttendanceRecord(
                employee_id=int(employee_id),
                work_date=work_date,
                status=status,
                has_overtime=bool(has_overtime),
                overtime_start=overtime_start,
                overtime_end=overtime_end,
                is_holiday=bool(is_holiday),
                notes=notes,
            )
        )

        existing = self._attendance.get_for_employee_and_date(record.employee_id, record.work_date)
        if existing:
            saved = replace(record, attendance_id=existing.attendance_id)
            self._attendance.update(saved)
            logger.info("Attendance record updated: %s", saved.attendance_id)
            return saved, False

        new_id = self._attendance.create(record)
        saved = replace(record, attendance_id=new_id)
        logger.info("Attendance record created: %s", new_id)
        return saved, True

    def update_attendance(self, attendance_id: int, **changes) -> AttendanceRecord:
        unknown = set(changes) - _UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(f"Geçersiz güncelleme alanları: {', '.join(sorted(unknown))}")

        current = self.get_attendance(attendance_id)
        updated = self._normalize(replace(current, **changes))

        if (updated.employee_id, updated.work_date) != (current.employee_id, current.work_date):
            if not self._employees.get_by_id(updated.employee_id):
                raise NotFoundError(f"Personel bulunamadı (ID: {updated.employee_id})")
            clash = self._attendance.get_for_employee_and_date(updated.employee_id, updated.work_date)
            if clash and clash.attendance_id != current.attendance_id:
                raise ValidationError("Bu personel için bu tarihte zaten puantaj kaydı var")

        self._attendance.update(updated)
        logger.info("Attendance record updated: %s", attendance_id)
        return updated

    def delete_attendance(self, attendance_id: int) -> None:
        if not self._attendance.delete(attendance_id):
            raise NotFoundError(f"Puantaj kaydı bulunamadı (ID: {attendance_id})")
        logger.info("Attendance record deleted: %s", attendance_id)

    def get_attendance(self, attendance_id: int) -> AttendanceRecord:
        record = self._attendance.get_by_id(attendance_id)
        if not record:
            raise NotFoundError(f"Puantaj kaydı bulunamadı (ID: {attendance_id})")
        return record

    def list_attendances(
        self,
        *,
        start_date: str,
        end_date: str,
        employee_id: Optional[int] = None,
    ) -> Sequence[AttendanceRecord]:
        start = parse_iso_date(require_iso_date(start_date, "Başlangıç tarihi"))
        end = parse_iso_date(require_iso_date(end_date, "Bitiş tarihi"))
        if end < start:
            raise ValidationError("Bitiş tarihi başlangıç tarihinden önce olamaz")
        return self._attendance.list_between(start_date=start, end_date=end, employee_id=employee_id)

    def list_month(self, employee_id: int, year: int, month: int) -> Sequence[AttendanceRecord]:
        require_month(year, month)
        start, end = month_bounds(year, month)
        return self._attendance.list_between(start_date=start, end_date=end, employee_id=employee_id)

    @staticmethod
    def _normalize(record: AttendanceRecord) -> AttendanceRecord:
        work_date = require_iso_date(record.work_date)
        status = require_status(record.status)
        start = require_clock(record.overtime_start, "mesai başlangıç saati")
        end = require_clock(record.overtime_end, "mesai bitiş saati")

        if record.has_overtime:
            if not start or not end:
                raise ValidationError("Mesai işaretliyse başlangıç ve bitiş saatleri zorunludur.")
        else:
            start = end = None

        return replace(record, work_date=work_date, status=status, overtime_start=start, overtime_end=end)
