"""Print the payroll (maaş) table for one month.

Usage: python scripts/monthly_payroll.py --year 2024 --month 1 [--employee-id 3]
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.construction_backoffice.construction_backoffice.container import build_container_from_settings
from src.construction_backoffice.construction_backoffice.core.exceptions import DomainError
from src.construction_backoffice.construction_backoffice.database.bootstrap import apply_schema

COLUMNS = [
    ("employee_id", "ID", 5),
    ("full_name", "Personel", 28),
    ("base_salary", "Maaş", 12),
    ("working_days", "Gün", 6),
    ("absent_days", "Devamsız", 9),
    ("overtime_hours", "Mesai (s)", 10),
    ("overtime_pay", "Mesai", 11),
    ("deductions", "Kesinti", 11),
    ("total_payable", "Ödenecek", 12),
]


def parse_args(argv=None) -> argparse.Namespace:
    today = date.today()
    parser = argparse.ArgumentParser(description="Monthly attendance-based payroll")
    parser.add_argument("--year", type=int, default=today.year)
    parser.add_argument("--month", type=int, default=today.month)
    parser.add_argument("--employee-id", type=int, default=None)
    return parser.parse_args(argv)


def render(report) -> str:
    header = " ".join(title.ljust(width) for _, title, width in COLUMNS)
    lines = [f"Dönem: {report.period}", header, "-" * len(header)]
    for row in report.rows:
        lines.append(" ".join(str(row[key]).ljust(width) for key, _, width in COLUMNS))
    lines.append("-" * len(header))
    lines.append(
        f"Toplam: {report.totals['employees']} personel, "
        f"mesai {report.totals['overtime_pay']}, kesinti {report.totals['deductions']}, "
        f"ödenecek {report.totals['total_payable']}"
    )
    return "\n".join(lines)


def main(argv=None) -> int:
    args = parse_args(argv)
    settings = load_settings()
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format="%(levelname)s %(name)s: %(message)s")

    if getattr(settings, "AUTO_INIT_DB", False):
        apply_schema(dict(settings.DB_CONFIG), schema_path=REPO_ROOT / "database" / "schema.sql")

    container = build_container_from_settings(settings)
    try:
        report = container.payroll_service.build_month_report(args.year, args.month, employee_id=args.employee_id)
    except DomainError as e:
        print(f"Hata: {e}", file=sys.stderr)
        return 1

    print(render(report))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
