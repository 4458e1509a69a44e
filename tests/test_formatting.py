import pytest
from datetime import date, datetime

from bookings_web.utils.formatting import format_long_date, format_time_range


@pytest.mark.parametrize('value,expected', [
    ("2024-03-05", "March 5, 2024"),
    ("2024-01-01", "January 1, 2024"),
    ("2024-03-05T10:15:00", "March 5, 2024"),
    ("2024-03-05T10:15:00Z", "March 5, 2024"),
    ("Tue, 05 Mar 2024 00:00:00 GMT", "March 5, 2024"),
    (date(2023, 12, 25), "December 25, 2023"),
    (datetime(2023, 7, 4, 8, 30), "July 4, 2023"),
])
def test_format_long_date(value, expected):
    assert format_long_date(value) == expected


@pytest.mark.parametrize('value', ["not-a-date", "", None, "2024-02-30", 20240305])
def test_format_long_date_invalid(value):
    assert format_long_date(value) == "Invalid Date"


def test_format_time_range():
    assert format_time_range("09:00", "09:30") == "09:00 - 09:30"
