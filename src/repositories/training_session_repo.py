"""
Repository for training session data access.
"""

from __future__ import annotations

from datetime import date
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import select, and_

from src.entities.training_session import TrainingSession
from src.repositories.base_repo import BaseRepository


class TrainingSessionRepository(BaseRepository[TrainingSession]):
    """
    Repository for training session queries.

    Only ``team`` sessions are returned; private sessions never count
    towards team attendance.
    """

    def __init__(self, session: Session) -> None:
        super().__init__(session=session, model=TrainingSession)

    def get_by_date(self, day: date) -> List[TrainingSession]:
        """
        Get team sessions scheduled on one day.

        Args:
            day: Session date

        Returns:
            List of TrainingSession entities ordered by start time
        """
        return self.get_by_date_range(day, day)

    def get_by_date_range(self, start: date, end: date) -> List[TrainingSession]:
        """
        Get team sessions scheduled between two dates (inclusive).

        Args:
            start: First date of the range
            end: Last date of the range

        Returns:
            List of TrainingSession entities ordered by date and start time
        """
        stmt = (
            select(TrainingSession)
            .where(
                and_(
                    TrainingSession.session_category == "team",
                    TrainingSession.date >= start,
                    TrainingSession.date <= end,
                )
            )
            .order_by(TrainingSession.date, TrainingSession.start_time)
        )
        return self._all(stmt)
