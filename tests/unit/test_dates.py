from __future__ import annotations

from datetime import date

import pytest

from flex_export.services.dates import format_date, parse_date


@pytest.mark.parametrize(
    "text, expected",
    [
        ("25/12/2024", "12/25/2024"),
        ("1/2/2024", "02/01/2024"),
        ("2024-03-01", "03/01/2024"),
        ("2024-01-15T10:30:00", "01/15/2024"),
        ("not-a-date", ""),
        ("31/02/2024", ""),
        ("12/2024", ""),
        ("aa/bb/cccc", ""),
        ("", ""),
        (None, ""),
    ],
)
def test_format_date(text, expected):
    assert format_date(text) == expected


def test_parse_date_day_first_with_slash():
    assert parse_date("03/04/2024") == date(2024, 4, 3)


def test_parse_date_generic():
    assert parse_date(" 2024-02-29 ") == date(2024, 2, 29)


def test_format_date_zero_pads_month_and_day():
    assert format_date("2024-06-05") == "06/05/2024"
    assert format_date("5/6/1999") == "06/05/1999"


@pytest.mark.parametrize("text", ["today", "now", "Today", " now "])
def test_format_date_rejects_relative_keywords(text):
    assert format_date(text) == ""
    assert parse_date(text) is None


@pytest.mark.parametrize("text", ["25/12/24", "5/6/999", "1/1/0"])
def test_format_date_rejects_short_years(text):
    assert format_date(text) == ""
