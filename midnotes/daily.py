"""Daily notes and the date formats shown around notes."""

from __future__ import annotations

import datetime

_WEEKDAY_ABBR = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTH_ABBR = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def daily_note_template(date_label: str) -> str:
    """Starting content of a daily note headed with the given date."""
    return (
        f"# 🗓️ Daily Note — {date_label}\n\n"
        "## ⚡️ Top Priority\n- [ ] \n\n"
        "## 📅 Schedule & Meetings\n- \n\n"
        "## 🛠️ Work Log\n- \n\n"
        "## ✅ Tasks\n- [ ] \n\n"
        "## 🧠 Brain Dump\n"
    )


def _day_label(moment: datetime.date) -> str:
    weekday = _WEEKDAY_ABBR[moment.weekday()]
    month = _MONTH_ABBR[moment.month - 1]
    return f"{weekday} {moment.day:02} {month} {moment.year:04}"


def daily_note_label(date_str: str) -> str:
    """A "YYYY-MM-DD" date written out for a heading; other text is kept as is."""
    try:
        parsed = datetime.datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        return date_str
    return _day_label(parsed)


def format_note_date(moment: datetime.datetime) -> str:
    """The last-updated stamp shown on a note card, on a 12-hour clock."""
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{_day_label(moment)} {hour:02}:{moment.minute:02} {meridiem}"


def format_snapshot_date(moment: datetime.datetime) -> str:
    """The short stamp shown for a saved version of a note."""
    month = _MONTH_ABBR[moment.month - 1]
    return f"{month} {moment.day:02} {moment.hour:02}:{moment.minute:02}"