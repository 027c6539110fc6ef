"""Month grid for the sidebar calendar."""

from __future__ import annotations

import calendar
import datetime
from collections.abc import Collection
from dataclasses import dataclass

_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def month_name(month: int) -> str:
    """English name of a month numbered from 1, or "" outside 1 to 12."""
    return _MONTH_NAMES[month - 1] if 1 <= month <= 12 else ""


@dataclass(frozen=True)
class DayCell:
    """One day of the month grid and how it is marked."""

    day: int
    date_key: str
    is_today: bool
    is_selected: bool
    has_notes: bool

    @property
    def show_dot(self) -> bool:
        """Whether the has-notes marker is drawn under the day."""
        return self.has_notes and not self.is_today and not self.is_selected


@dataclass(frozen=True)
class MonthView:
    """The month shown in the calendar."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month out of range: {self.month}")
        datetime.date(self.year, self.month, 1)

    def previous(self) -> MonthView:
        if self.month == 1:
            return MonthView(self.year - 1, 12)
        return MonthView(self.year, self.month - 1)

    def next(self) -> MonthView:
        if self.month == 12:
            return MonthView(self.year + 1, 1)
        return MonthView(self.year, self.month + 1)

    def title(self) -> str:
        return f"{month_name(self.month)} {self.year}"

    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    def leading_blanks(self) -> int:
        """Empty cells before the first day, with weeks starting on Monday."""
        return datetime.date(self.year, self.month, 1).weekday()

    def date_key(self, day: int) -> str:
        """The day as "YYYY-MM-DD"."""
        return f"{self.year:04}-{self.month:02}-{day:02}"

    def days(
        self,
        note_dates: Collection[str],
        today: datetime.date,
        selected: str = "",
    ) -> list[DayCell]:
        """Cells for every day of the month, marked against today and the selection."""
        cells = []
        for day in range(1, self.days_in_month() + 1):
            key = self.date_key(day)
            cells.append(
                DayCell(
                    day=day,
                    date_key=key,
                    is_today=(today.year, today.month, today.day)
                    == (self.year, self.month, day),
                    is_selected=selected == key,
                    has_notes=key in note_dates,
                )
            )
        return cells