import pytest

from src.construction_backoffice.construction_backoffice.common.datetime_utils import (
    days_in_month,
    format_period,
    month_date_strings,
)
from src.construction_backoffice.construction_backoffice.common.result import ParseResult
from src.construction_backoffice.construction_backoffice.common.validators import require_clock, require_period
from src.construction_backoffice.construction_backoffice.core.exceptions import ValidationError
from src.construction_backoffice.construction_backoffice.database.bootstrap import iter_sql_statements


def test_month_date_strings_are_zero_padded():
    days = list(month_date_strings(2023, 2))
    assert len(days) == days_in_month(2023, 2) == 28
    assert days[0] == "2023-02-01"
    assert days[-1] == "2023-02-28"


def test_period_formatting_and_validation():
    assert format_period(2024, 3) == "2024-03"
    assert require_period("2024-12") == "2024-12"
    with pytest.raises(ValidationError):
        require_period("2024-3")


def test_clock_validation():
    assert require_clock("", "saat") is None
    assert require_clock("07:05", "saat") == "07:05"
    with pytest.raises(ValidationError):
        require_clock("7:05", "saat")


def test_parse_result_defaults_only_on_failure():
    assert ParseResult.success(0.0).value_or(5.0) == 0.0
    assert ParseResult.failure("bad").value_or(5.0) == 5.0


def test_sql_splitter_keeps_quoted_semicolons():
    sql = "-- comment\nCREATE TABLE a (x INT);\nINSERT INTO a VALUES ('x;y');\n"
    assert list(iter_sql_statements(sql)) == ["CREATE TABLE a (x INT)", "INSERT INTO a VALUES ('x;y')"]
