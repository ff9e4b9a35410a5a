from datetime import date

import pytest

from models import Habit

# A Wednesday
TODAY = date(2024, 3, 13)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def daily_habit():
    return Habit(name="Read", created_date="2024-03-01", id="habit_1_daily")
