from ui.forms import day_flags, parse_tags, read_form, selected_days


def test_parse_tags():
    assert parse_tags(" health, morning ,, health ") == ["health", "morning", "health"]
    assert parse_tags("") == []


def test_selected_days_none_or_all_mean_every_day():
    assert selected_days([False] * 7) is None
    assert selected_days([True] * 7) is None
    assert selected_days([False, True, False, True, False, True, False]) == [1, 3, 5]


def test_day_flags_for_edit_form():
    assert day_flags(None) == [True] * 7
    assert day_flags([0, 6]) == [True, False, False, False, False, False, True]


def test_read_form_trims_and_blanks():
    data = read_form("  Read ", "  ", [True] * 7, " pages ", "mind, books")
    assert data.name == "Read"
    assert data.notification_time is None
    assert data.days_of_week is None
    assert data.notes == "pages"
    assert data.tags == ["mind", "books"]

    data = read_form("Gym", "06:30", [False, True, False, False, False, True, False], "", "")
    assert data.notification_time == "06:30"
    assert data.days_of_week == [1, 5]
