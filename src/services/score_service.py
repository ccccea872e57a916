"""
Player performance score over a date range.

The score blends three inputs:

    40%  points earned vs the weekly target (capped at 100)
    30%  workout frequency against an ideal of 7 sessions (not capped)
    30%  average workout completion percentage

Missing data never raises: no logs means a score of 0 and a missing points
row contributes nothing. Database errors propagate to the caller.
"""

from __future__ import annotations

import logging
from datetime import date

from sqlalchemy.orm import Session

from src.core.report_utils import iso_week_key, round_half_up
from src.repositories.weekly_points_repo import WeeklyPointsRepository
from src.repositories.workout_log_repo import WorkoutLogRepository

logger = logging.getLogger(__name__)

IDEAL_SESSIONS = 7
POINTS_WEIGHT = 0.4
WORKOUT_WEIGHT = 0.3
COMPLETION_WEIGHT = 0.3


class ScoreCalculator:
    """Computes a player's 0-100 performance score for a date range."""

    def __init__(self, session: Session) -> None:
        self.workout_repo = WorkoutLogRepository(session)
        self.points_repo = WeeklyPointsRepository(session)

    def calculate(self, player_id: str, start: date, end: date) -> int:
        """
        Score a player's training between *start* and *end* (inclusive).

        Points are read from the ISO week that contains *end*.

        Args:
            player_id: User ID of the player
            start: First date of the range
            end: Last date of the range

        Returns:
            Rounded weighted score
        """
        workouts = self.workout_repo.get_by_player_and_range(player_id, start, end)
        if not workouts:
            return 0

        weekly_points = self.points_repo.get_by_player_and_week(
            player_id, iso_week_key(end)
        )
        points_score = 0.0
        if weekly_points is not None and weekly_points.target_points > 0:
            points_score = min(
                100.0, weekly_points.total_points / weekly_points.target_points * 100
            )

        # Not capped, unlike points_score.
        workout_score = len(workouts) / IDEAL_SESSIONS * 100
        completion_score = sum(
            w.completion_percentage or 0 for w in workouts
        ) / len(workouts)

        score = round_half_up(
            points_score * POINTS_WEIGHT
            + workout_score * WORKOUT_WEIGHT
            + completion_score * COMPLETION_WEIGHT
        )
        logger.debug(
            "Score for %s %s..%s: points=%.1f workouts=%.1f completion=%.1f -> %d",
            player_id,
            start,
            end,
            points_score,
            workout_score,
            completion_score,
            score,
        )
        return score
