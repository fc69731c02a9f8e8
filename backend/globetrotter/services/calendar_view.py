"""
Month and week projections of a user's trips.

Grids always span whole Sunday-to-Saturday weeks, so a month grid starts on
the Sunday on/before the 1st and ends on the Saturday on/after the last day.
"""

import calendar
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Optional, Sequence

from globetrotter.services.budget import day_budget
from globetrotter.services.date_ranges import DateLike, contains_day, parse_date


def month_start(day: date) -> date:
    return day.replace(day=1)


def month_end(day: date) -> date:
    _, last = calendar.monthrange(day.year, day.month)
    return day.replace(day=last)


def week_start(day: date) -> date:
    # date.weekday(): Monday=0 .. Sunday=6
    return day - timedelta(days=(day.weekday() + 1) % 7)


def week_end(day: date) -> date:
    return week_start(day) + timedelta(days=6)


def add_months(day: date, months: int) -> date:
    """First day of the month `months` away from `day`'s month."""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def date_span(start: date, end: date) -> list[date]:
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


@dataclass
class CalendarDay:
    date: date
    is_current_month: bool
    is_today: bool
    trips: list = field(default_factory=list)

    @property
    def trip_count(self) -> int:
        return len(self.trips)


@dataclass
class DaySummary:
    date: date
    trips: list
    trip_count: int
    total_budget: float


class CalendarProjector:
    """
    Projects trips onto calendar days.

    Holds the two independent pieces of calendar UI state: the displayed
    month and an optional selected day.
    """

    def __init__(self, trips: Sequence, month: DateLike = None, today: Optional[date] = None):
        self.trips = list(trips)
        self.today = today or date.today()
        self.month = month_start(parse_date(month) or self.today)
        self.selected_day: Optional[date] = None

    @property
    def title(self) -> str:
        return f"{calendar.month_name[self.month.month]} {self.month.year}"

    def trips_for_day(self, day: DateLike) -> list:
        return [t for t in self.trips if contains_day(day, t.start_date, t.end_date)]

    def _project(self, days: list[date]) -> list[CalendarDay]:
        return [
            CalendarDay(
                date=d,
                is_current_month=(d.year, d.month) == (self.month.year, self.month.month),
                is_today=d == self.today,
                trips=self.trips_for_day(d),
            )
            for d in days
        ]

    def grid(self) -> list[CalendarDay]:
        start = week_start(month_start(self.month))
        end = week_end(month_end(self.month))
        return self._project(date_span(start, end))

    def weeks(self) -> list[list[CalendarDay]]:
        days = self.grid()
        return [days[i:i + 7] for i in range(0, len(days), 7)]

    def week_grid(self, day: DateLike = None) -> list[CalendarDay]:
        """
        The week containing `day`, else the selected day, else today when
        today is in the displayed month, else the 1st of the displayed month.
        """
        anchor = parse_date(day) or self.selected_day
        if anchor is None:
            in_month = (self.today.year, self.today.month) == (self.month.year, self.month.month)
            anchor = self.today if in_month else self.month
        return self._project(date_span(week_start(anchor), week_end(anchor)))

    def next_month(self) -> date:
        self.month = add_months(self.month, 1)
        return self.month

    def previous_month(self) -> date:
        self.month = add_months(self.month, -1)
        return self.month

    def select_day(self, day: DateLike) -> Optional[date]:
        self.selected_day = parse_date(day)
        return self.selected_day

    def clear_selection(self) -> None:
        self.selected_day = None

    def day_summary(self, day: DateLike) -> Optional[DaySummary]:
        day_value = parse_date(day)
        if day_value is None:
            return None
        trips = self.trips_for_day(day_value)
        return DaySummary(
            date=day_value,
            trips=trips,
            trip_count=len(trips),
            total_budget=day_budget(trips, day_value),
        )

    def selected_summary(self) -> Optional[DaySummary]:
        if self.selected_day is None:
            return None
        return self.day_summary(self.selected_day)
