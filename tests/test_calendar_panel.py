import datetime

import pytest

from midnotes.calendar_panel import DayCell, MonthView, month_name


def test_month_names():
    assert month_name(1) == "January"
    assert month_name(12) == "December"
    assert month_name(0) == ""
    assert month_name(13) == ""


def test_title_joins_name_and_year():
    assert MonthView(2024, 2).title() == f"{month_name(2)} 2024"


def test_previous_and_next_wrap_years():
    assert MonthView(2024, 1).previous() == MonthView(2023, 12)
    assert MonthView(2024, 12).next() == MonthView(2025, 1)
    assert MonthView(2024, 6).next().previous() == MonthView(2024, 6)


@pytest.mark.parametrize("month", [0, 13, -1])
def test_invalid_month_raises(month):
    with pytest.raises(ValueError):
        MonthView(2024, month)


def test_leap_february():
    assert MonthView(2024, 2).days_in_month() == 29


@pytest.mark.parametrize("year,month", [(2023, 2), (2024, 4), (2024, 12), (1999, 7)])
def test_last_day_is_followed_by_next_month(year, month):
    view = MonthView(year, month)
    last = datetime.date.fromisoformat(view.date_key(view.days_in_month()))
    following = last + datetime.timedelta(days=1)
    nxt = view.next()
    assert (following.year, following.month, following.day) == (nxt.year, nxt.month, 1)


def test_leading_blanks_is_weekday_of_first():
    view = MonthView(2024, 2)
    assert view.leading_blanks() == 3
    first = datetime.date.fromisoformat(view.date_key(1))
    assert first.weekday() == view.leading_blanks()


def test_date_key_pads():
    key = MonthView(2024, 3).date_key(5)
    assert datetime.date.fromisoformat(key) == datetime.date(2024, 3, 5)
    assert len(key) == 10


def test_days_marks_today_selection_and_notes():
    view = MonthView(2024, 3)
    today = datetime.date(2024, 3, 10)
    notes = {view.date_key(10), view.date_key(11), view.date_key(12)}
    cells = view.days(notes, today, view.date_key(12))
    assert len(cells) == view.days_in_month()
    assert [c.day for c in cells] == list(range(1, len(cells) + 1))
    by_day = {c.day: c for c in cells}
    assert by_day[10].is_today and not by_day[10].show_dot
    assert by_day[11].has_notes and by_day[11].show_dot
    assert by_day[12].is_selected and not by_day[12].show_dot
    assert not by_day[1].has_notes and not by_day[1].show_dot
    assert sum(c.is_today for c in cells) == 1


def test_today_outside_month_marks_nothing():
    view = MonthView(2024, 3)
    cells = view.days(set(), datetime.date(2024, 4, 10))
    assert not any(c.is_today or c.is_selected for c in cells)


def test_day_cell_dot_rule():
    assert DayCell(1, "2024-01-01", False, False, True).show_dot is True
    assert DayCell(1, "2024-01-01", True, False, True).show_dot is False
    assert DayCell(1, "2024-01-01", False, False, False).show_dot is False