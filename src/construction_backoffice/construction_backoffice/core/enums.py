from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Puantaj durum kodları (tek karakter, veritabanında bu haliyle saklanır)."""

    FULL_DAY = "G"
    HALF_DAY = "Y"
    LEAVE = "İ"
    SICK = "R"
    ABSENT = "X"
    HOLIDAY = "T"


class OvertimeCategory(str, Enum):
    WEEKDAY = "WEEKDAY"
    WEEKEND = "WEEKEND"
    HOLIDAY = "HOLIDAY"


class MissingDayPolicy(str, Enum):
    """What a day without an attendance record means for payroll."""

    UNKNOWN = "UNKNOWN"
    ABSENT = "ABSENT"


class PaymentMethod(str, Enum):
    BANK_TRANSFER = "BANK_TRANSFER"
    CASH = "CASH"
    CHECK = "CHECK"
    OTHER = "OTHER"
