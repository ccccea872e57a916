"""
Service for generating daily, weekly and monthly player reports.

Architecture:
    ReportService -> PeriodAggregator -> repositories + ScoreCalculator
    ReportService -> WorkoutLogRepository (breakdown buckets)

Reports are read-only views recomputed from workout logs, points and
assignments on every call; nothing is cached or written. A failure in any
query aborts the whole report.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from src.core.database import SessionLocal
from src.core.report_utils import iso_week_key, round_half_up
from src.dtos.report_dto import (
    DailyBreakdownItem,
    DailyReport,
    MonthlyReport,
    WeeklyBreakdownItem,
    WeeklyReport,
)
from src.repositories.workout_log_repo import WorkoutLogRepository
from src.services.period_aggregator import PeriodAggregator
from src.services.period_strategy import (
    DateRange,
    DayPeriod,
    MonthPeriod,
    WeekPeriod,
)
from src.services.score_service import ScoreCalculator

logger = logging.getLogger(__name__)


class ReportService:
    """
    Assembles report documents for a period.

    Handles:
    - Daily reports with the day's team sessions
    - Weekly reports with a per-day breakdown
    - Monthly reports with a per-week breakdown and improvement/decline lists
    """

    def __init__(self, db_session: Optional[Session] = None) -> None:
        """
        Initialize the service.

        Args:
            db_session: Optional database session (will create new if not provided)
        """
        self.db = db_session or SessionLocal()
        self.aggregator = PeriodAggregator(self.db)
        self.workout_repo = WorkoutLogRepository(self.db)
        self.scorer = ScoreCalculator(self.db)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.db:
            self.db.close()

    def generate_daily_report(self, day: date) -> DailyReport:
        """
        Generate the report for a single day.

        Args:
            day: Report date

        Returns:
            DailyReport including the day's team sessions
        """
        logger.info("Generating daily report for %s", day.isoformat())
        strategy = DayPeriod(day)
        result = self.aggregator.aggregate(strategy)

        return DailyReport(
            summary=result.to_summary(
                strategy, team_sessions=result.session_summaries()
            ),
            players=result.players,
            generated_at=_now(),
        )

    def generate_weekly_report(self, start_date: date) -> WeeklyReport:
        """
        Generate the report for the 7 days starting at *start_date*.

        Args:
            start_date: First day of the week (usually a Monday)

        Returns:
            WeeklyReport with one breakdown entry per day
        """
        logger.info("Generating weekly report starting from %s", start_date.isoformat())
        strategy = WeekPeriod(start_date)
        result = self.aggregator.aggregate(strategy)

        daily_breakdown = []
        for bucket in strategy.breakdown_ranges():
            active, avg_score, minutes = self._bucket_stats(bucket)
            daily_breakdown.append(
                DailyBreakdownItem(
                    date=bucket.start.isoformat(),
                    active_players=active,
                    avg_score=avg_score,
                    total_minutes=minutes,
                )
            )

        return WeeklyReport(
            summary=result.to_summary(strategy),
            players=result.players,
            daily_breakdown=daily_breakdown,
            generated_at=_now(),
        )

    def generate_monthly_report(self, month: str) -> MonthlyReport:
        """
        Generate the report for a calendar month.

        Args:
            month: Month in ``YYYY-MM`` format

        Returns:
            MonthlyReport with a per-week breakdown and the top 5
            improvements and declines

        Raises:
            InvalidPeriodError: if *month* is not a valid ``YYYY-MM`` month
        """
        strategy = MonthPeriod(month)
        logger.info("Generating monthly report for %s", month)
        result = self.aggregator.aggregate(strategy)

        weekly_breakdown = []
        for bucket in strategy.breakdown_ranges():
            active, avg_score, minutes = self._bucket_stats(bucket)
            weekly_breakdown.append(
                WeeklyBreakdownItem(
                    week=iso_week_key(bucket.start),
                    active_players=active,
                    avg_score=avg_score,
                    total_minutes=minutes,
                )
            )

        return MonthlyReport(
            summary=result.to_summary(strategy),
            players=result.players,
            weekly_breakdown=weekly_breakdown,
            improvements=result.improvements,
            declines=result.declines,
            generated_at=_now(),
        )

    def _bucket_stats(self, bucket: DateRange) -> tuple[int, int, int]:
        """Active players, their average score and total minutes in *bucket*."""
        workouts = self.workout_repo.get_by_date_range(bucket.start, bucket.end)
        # dict keeps first-logged order; the players need not be on the roster
        player_ids = list(dict.fromkeys(w.user_id for w in workouts))
        minutes = sum(w.duration or 0 for w in workouts)

        if not player_ids:
            return 0, 0, minutes
        total_score = sum(
            self.scorer.calculate(pid, bucket.start, bucket.end) for pid in player_ids
        )
        return len(player_ids), round_half_up(total_score / len(player_ids)), minutes


def _now() -> datetime:
    return datetime.now(timezone.utc)
