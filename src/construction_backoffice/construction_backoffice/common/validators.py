from __future__ import annotations

import re
from datetime import date
from typing import Optional

from .datetime_utils import CLOCK_RE
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_PERIOD_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def require_iso_date(value: str, field_name: str = "Tarih") -> str:
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise ValidationError(f"Geçersiz {field_name.lower()} formatı (YYYY-MM-DD)")
    try:
        date.fromisoformat(value)
    except ValueError as e:
        raise ValidationError(f"Geçersiz {field_name.lower()}: {value}") from e
    return value


def require_clock(value: Optional[str], field_name: str) -> Optional[str]:
    if value is None or value == "":
        return None
    if not isinstance(value, str) or not CLOCK_RE.match(value):
        raise ValidationError(f"Geçersiz {field_name} (HH:MM)")
    hours, minutes = (int(p) for p in value.split(":"))
    if hours > 23 or minutes > 59:
        raise ValidationError(f"Geçersiz {field_name} (HH:MM)")
    return value


def require_status(value) -> AttendanceStatus:
    try:
        return AttendanceStatus(value)
    except ValueError as e:
        raise ValidationError("Geçersiz durum kodu") from e


def require_month(year: int, month: int) -> None:
    if not 1 <= int(month) <= 12:
        raise ValidationError(f"Geçersiz ay: {month} (1-12)")
    if int(year) < 1:
        raise ValidationError(f"Geçersiz yıl: {year}")


def require_period(value: str) -> str:
    if not isinstance(value, str) or not _PERIOD_RE.match(value):
        raise ValidationError("Geçersiz ödeme dönemi (YYYY-MM)")
    return value


def require_non_negative(value: float, field_name: str) -> float:
    if value is None or float(value) < 0:
        raise ValidationError(f"{field_name} sıfırdan küçük olamaz")
    return float(value)
