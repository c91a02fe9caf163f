from datetime import datetime

import pytest
from article_reader.utils.date import (
    format_long_date, normalize_date, parse_calendar_date
)


@pytest.mark.parametrize("raw,expected", [
    ("2024-01-05", "January 5, 2024"),
    ("2024-01-05T10:30:00Z", "January 5, 2024"),
    ("2023-06-15T08:00:00+02:00", "June 15, 2023"),
    ("Fri, 05 Jan 2024 12:00:01 +0000", "January 5, 2024"),
    ("June 23, 2025", "June 23, 2025"),
    ("  December 25, 2024  ", "December 25, 2024"),
])
def test_normalize_date(raw, expected):
    assert normalize_date(raw) == expected


@pytest.mark.parametrize("raw", [
    "not a date",
    "",
    "   ",
    None,
    "99999999999999999999",
])
def test_normalize_date_invalid_returns_none(raw):
    assert normalize_date(raw) is None


@pytest.mark.parametrize("raw", ["March 2024", "12"])
def test_normalize_date_ambiguous_returns_none(raw):
    assert parse_calendar_date(raw) is None


def test_format_long_date_has_no_leading_zero():
    assert format_long_date(datetime(2024, 3, 7)) == "March 7, 2024"
