from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .core.enums import MissingDayPolicy
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .payroll.calculator.standard_calculator import StandardSalaryCalculator
from .payroll.mysql_payment_repository import MySQLSalaryPaymentRepository
from .payroll.service import PayrollService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    attendance_repo: MySQLAttendanceRepository
    payments_repo: MySQLSalaryPaymentRepository

    attendance_service: AttendanceService
    payroll_service: PayrollService


def build_container(*, db_config: dict, count_missing_weekdays_as_absent: bool = False) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    payments_repo = MySQLSalaryPaymentRepository(conn)

    policy = MissingDayPolicy.ABSENT if count_missing_weekdays_as_absent else MissingDayPolicy.UNKNOWN
    attendance_service = AttendanceService(attendance_repo, employees_repo)
    payroll_service = PayrollService(
        employees_repo,
        attendance_repo,
        payments_repo,
        calculator=StandardSalaryCalculator(missing_day_policy=policy),
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        payments_repo=payments_repo,
        attendance_service=attendance_service,
        payroll_service=payroll_service,
    )


def build_container_from_settings(settings) -> Container:
    return build_container(
        db_config=dict(getattr(settings, "DB_CONFIG")),
        count_missing_weekdays_as_absent=bool(getattr(settings, "COUNT_MISSING_WEEKDAYS_AS_ABSENT", False)),
    )
