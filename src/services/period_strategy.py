"""
Report period strategies.

Daily, weekly and monthly reports run the same aggregation; they differ only
in how the date range and the previous range are derived and in how many
workouts a player is expected to complete. Each period implements those
three things once:

    DayPeriod(date(2024, 3, 5))     -> 2024-03-05 .. 2024-03-05
    WeekPeriod(date(2024, 3, 4))    -> 2024-03-04 .. 2024-03-10
    MonthPeriod("2024-02")          -> 2024-02-01 .. 2024-02-29
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional, TypeVar

from src.core.report_utils import (
    InvalidPeriodError,
    days_in_month,
    parse_frequency,
    parse_month,
)
from src.dtos.report_dto import ReportPeriod
from src.entities.training_template import TrainingTemplate

T = TypeVar("T")

# Applied when an assigned template has no frequency text at all
DEFAULT_FREQUENCY = "3"


def or_default(value: Optional[T], default: T) -> T:
    """Return *value*, or *default* when it is None (0 is kept)."""
    return default if value is None else value


def template_frequency(template: Optional[TrainingTemplate]) -> Optional[int]:
    """Workouts per week of an assigned template; None when unassigned or unparseable."""
    if template is None:
        return None
    return parse_frequency(template.frequency_per_week or DEFAULT_FREQUENCY)


def frequency_label(template: Optional[TrainingTemplate]) -> str:
    if template is None:
        return DEFAULT_FREQUENCY
    return template.frequency_per_week or DEFAULT_FREQUENCY


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar dates."""

    start: date
    end: date

    @property
    def length_days(self) -> int:
        return (self.end - self.start).days + 1

    def days(self) -> list[date]:
        return [self.start + timedelta(days=i) for i in range(self.length_days)]

    def chunks(self, size: int) -> list[DateRange]:
        """Split into consecutive ranges of *size* days, the last one truncated."""
        ranges = []
        chunk_start = self.start
        while True:
            remaining = (self.end - chunk_start).days
            chunk_end = chunk_start + timedelta(days=min(size - 1, remaining))
            ranges.append(DateRange(chunk_start, chunk_end))
            if chunk_end == self.end:
                return ranges
            chunk_start = chunk_end + timedelta(days=1)


class PeriodStrategy(ABC):
    """Date-range derivation and expected-workout policy for one report period."""

    period: ReportPeriod
    # Whether player records carry days-trained and team-session counters
    tracks_period_counters: bool = False

    @abstractmethod
    def date_range(self) -> DateRange:
        """The range the report covers."""

    @abstractmethod
    def previous_range(self) -> DateRange:
        """The equivalent range immediately before :meth:`date_range`."""

    @abstractmethod
    def assigned_workouts(self, template: Optional[TrainingTemplate]) -> float:
        """Workouts a player with *template* (None if unassigned) should complete."""

    def breakdown_ranges(self) -> list[DateRange]:
        """Buckets for the period's breakdown section; none by default."""
        return []

    @property
    def date_iso(self) -> str:
        return self.date_range().start.isoformat()

    def _check_calendar_bounds(self) -> None:
        """Reject anchors whose range or previous range falls outside 0001..9999."""
        try:
            self.date_range()
            self.previous_range()
        except OverflowError as exc:
            raise InvalidPeriodError(
                f"{self.period} period at {self.anchor} is outside the supported calendar"
            ) from exc


class DayPeriod(PeriodStrategy):
    period = "day"
    unassigned_workouts = 1

    def __init__(self, day: date) -> None:
        self.day = day
        self.anchor = day.isoformat()
        self._check_calendar_bounds()

    def date_range(self) -> DateRange:
        return DateRange(self.day, self.day)

    def previous_range(self) -> DateRange:
        previous = self.day - timedelta(days=1)
        return DateRange(previous, previous)

    def assigned_workouts(self, template: Optional[TrainingTemplate]) -> float:
        return or_default(template_frequency(template), self.unassigned_workouts)


class WeekPeriod(PeriodStrategy):
    period = "week"
    tracks_period_counters = True
    unassigned_workouts = 3

    def __init__(self, start_date: date) -> None:
        self.start_date = start_date
        self.anchor = start_date.isoformat()
        self._check_calendar_bounds()

    def date_range(self) -> DateRange:
        return DateRange(self.start_date, self.start_date + timedelta(days=6))

    def previous_range(self) -> DateRange:
        previous_start = self.start_date - timedelta(days=7)
        return DateRange(previous_start, previous_start + timedelta(days=6))

    def assigned_workouts(self, template: Optional[TrainingTemplate]) -> float:
        return or_default(template_frequency(template), self.unassigned_workouts)

    def breakdown_ranges(self) -> list[DateRange]:
        return [DateRange(day, day) for day in self.date_range().days()]


class MonthPeriod(PeriodStrategy):
    """
    A calendar month given as ``YYYY-MM``.

    Expected workouts scale the weekly frequency to the month length and round
    up; unassigned players are expected ``days_in_month / 7`` workouts, left
    unrounded.

    Raises:
        InvalidPeriodError: if *month* is not a valid ``YYYY-MM`` month, or is
            0001-01 whose previous month is outside the calendar
    """

    period = "month"
    tracks_period_counters = True

    def __init__(self, month: str) -> None:
        self.month = month
        self.year, self.month_num = parse_month(month)
        self.days_in_month = days_in_month(self.year, self.month_num)
        self.anchor = month
        self._check_calendar_bounds()

    def date_range(self) -> DateRange:
        return DateRange(
            date(self.year, self.month_num, 1),
            date(self.year, self.month_num, self.days_in_month),
        )

    def previous_range(self) -> DateRange:
        previous_end = date(self.year, self.month_num, 1) - timedelta(days=1)
        return DateRange(previous_end.replace(day=1), previous_end)

    def assigned_workouts(self, template: Optional[TrainingTemplate]) -> float:
        frequency = template_frequency(template)
        if frequency is None:
            return self.days_in_month / 7
        return math.ceil(frequency * self.days_in_month / 7)

    def breakdown_ranges(self) -> list[DateRange]:
        return self.date_range().chunks(7)
