"""Shared date and number helpers for report generation.

The period strategies, the score calculator and the aggregator all reuse
these so that week keys and rounding agree everywhere.
"""

import calendar
import math
import re
from datetime import date, timedelta
from typing import Optional

MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


class InvalidPeriodError(ValueError):
    """Raised when a report period cannot be parsed (e.g. a bad ``YYYY-MM``)."""


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity (-2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def round_one_decimal(value: float) -> float:
    """Round to one decimal place using the same half-up rule."""
    return math.floor(value * 10 + 0.5) / 10


def iso_week_key(day: date) -> str:
    """Return the ISO week key for *day*, e.g. ``2024-W05``.

    Weeks start on Monday and week 1 is the week holding the year's first
    Thursday, so early-January dates can belong to the previous year.
    """
    iso_year, iso_week, _ = day.isocalendar()
    return f"{iso_year:04d}-W{iso_week:02d}"


def week_start(day: date) -> date:
    """Monday of the week containing *day*."""
    return day - timedelta(days=day.weekday())


def parse_month(month: str) -> tuple[int, int]:
    """Parse ``YYYY-MM`` into ``(year, month)``.

    Raises:
        InvalidPeriodError: if the text is not a real calendar month
    """
    match = MONTH_PATTERN.match(month or "")
    if not match:
        raise InvalidPeriodError(f"Invalid month format '{month}'. Use YYYY-MM")
    year, month_num = int(match.group(1)), int(match.group(2))
    if not 1 <= month_num <= 12 or year < 1:
        raise InvalidPeriodError(f"Invalid month '{month}'")
    return year, month_num


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def parse_frequency(text: Optional[str]) -> Optional[int]:
    """Leading integer of a plan's weekly frequency text.

    ``"3"`` -> 3, ``"2-3"`` -> 2, ``"4x"`` -> 4; ``None`` when no digits lead
    (signs are not accepted, so ``"-1"`` is ``None``).
    """
    if text is None:
        return None
    match = re.match(r"\s*(\d+)", str(text))
    if not match:
        return None
    return int(match.group(1))
