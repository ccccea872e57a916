"""
Repository for workout log data access.
"""

from __future__ import annotations

from datetime import date
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import select, and_

from src.entities.workout_log import WorkoutLog
from src.repositories.base_repo import BaseRepository


class WorkoutLogRepository(BaseRepository[WorkoutLog]):
    """
    Repository for workout log queries.

    All date ranges are inclusive on both ends.
    """

    def __init__(self, session: Session) -> None:
        super().__init__(session=session, model=WorkoutLog)

    def get_by_player_and_range(
        self, player_id: str, start: date, end: date
    ) -> List[WorkoutLog]:
        """
        Get a player's workouts between two dates.

        Args:
            player_id: User ID of the player
            start: First date of the range
            end: Last date of the range

        Returns:
            List of WorkoutLog entities, oldest first
        """
        stmt = (
            select(WorkoutLog)
            .where(
                and_(
                    WorkoutLog.user_id == player_id,
                    WorkoutLog.date >= start,
                    WorkoutLog.date <= end,
                )
            )
            .order_by(WorkoutLog.date, WorkoutLog.id)
        )
        return self._all(stmt)

    def get_by_date_range(self, start: date, end: date) -> List[WorkoutLog]:
        """
        Get every player's workouts between two dates.

        Args:
            start: First date of the range
            end: Last date of the range

        Returns:
            List of WorkoutLog entities, oldest first
        """
        stmt = (
            select(WorkoutLog)
            .where(and_(WorkoutLog.date >= start, WorkoutLog.date <= end))
            .order_by(WorkoutLog.date, WorkoutLog.id)
        )
        return self._all(stmt)
