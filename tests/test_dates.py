from datetime import date, datetime

import pytest

import dates


def test_to_day_accepts_every_representation():
    assert dates.to_day("2024-03-09") == date(2024, 3, 9)
    assert dates.to_day("2024-03-09T23:59:59") == date(2024, 3, 9)
    assert dates.to_day(date(2024, 3, 9)) == date(2024, 3, 9)
    assert dates.to_day(datetime(2024, 3, 9, 23, 59)) == date(2024, 3, 9)


def test_to_day_accepts_space_separated_timestamps():
    assert dates.to_day("2024-03-09 23:30:00") == date(2024, 3, 9)
    assert dates.day_key(" 2024-03-09 00:00 ") == "2024-03-09"


def test_day_key_is_canonical():
    assert dates.day_key("2024-03-09T00:30:00") == "2024-03-09"
    assert dates.day_key(datetime(2024, 3, 9, 0, 30)) == "2024-03-09"


def test_invalid_inputs():
    with pytest.raises(ValueError):
        dates.to_day("not a day")
    with pytest.raises(ValueError):
        dates.to_day("2024-13-01")
    with pytest.raises(TypeError):
        dates.to_day(20240309)


def test_weekday_number_is_sunday_based():
    assert dates.weekday_number("2024-03-10") == 0  # Sunday
    assert dates.weekday_number("2024-03-11") == 1  # Monday
    assert dates.weekday_number(date(2024, 3, 16)) == 6  # Saturday


def test_day_arithmetic():
    assert dates.add_days("2024-02-28", 2) == date(2024, 3, 1)
    assert dates.add_days("2024-03-01", -1) == date(2024, 2, 29)
    assert dates.days_inclusive("2024-03-01", "2024-03-01") == 1
    assert dates.days_inclusive("2024-03-01", "2024-03-10") == 10
    assert list(dates.iter_days("2024-03-01", "2024-03-03")) == [
        date(2024, 3, 1),
        date(2024, 3, 2),
        date(2024, 3, 3),
    ]
    assert list(dates.iter_days("2024-03-03", "2024-03-01")) == []
