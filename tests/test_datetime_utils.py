from __future__ import annotations

from datetime import date

import pytest

from src.team_attendance.team_attendance.common.datetime_utils import (
    format_date_de,
    format_date_long_de,
    parse_optional_date,
    relative_day_label,
)
from src.team_attendance.team_attendance.core.exceptions import ValidationError


def test_german_formats():
    d = date(2024, 3, 4)

    assert format_date_de(d) == "04.03.2024"
    assert format_date_long_de(d) == "Montag, 4. März 2024"


def test_parse_optional_date():
    assert parse_optional_date("") is None
    assert parse_optional_date(" 2024-05-01 ") == date(2024, 5, 1)
    with pytest.raises(ValidationError):
        parse_optional_date("01.05.2024")


@pytest.mark.parametrize(
    "d,expected",
    [(date(2024, 5, 1), "Heute"), (date(2024, 5, 2), "Morgen"), (date(2024, 5, 3), None)],
)
def test_relative_day_label(d, expected):
    assert relative_day_label(d, date(2024, 5, 1)) == expected
