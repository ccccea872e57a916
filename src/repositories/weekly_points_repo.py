from __future__ import annotations

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy import select, and_

from src.entities.player_weekly_points import PlayerWeeklyPoints
from src.repositories.base_repo import BaseRepository


class WeeklyPointsRepository(BaseRepository[PlayerWeeklyPoints]):
    def __init__(self, session: Session) -> None:
        super().__init__(session=session, model=PlayerWeeklyPoints)

    def get_by_player_and_week(
        self, player_id: str, week: str
    ) -> Optional[PlayerWeeklyPoints]:
        """Points row for one player and ISO week key (``2024-W05``), or None."""
        stmt = select(PlayerWeeklyPoints).where(
            and_(
                PlayerWeeklyPoints.user_id == player_id,
                PlayerWeeklyPoints.week == week,
            )
        )
        return self.session.execute(stmt).scalar_one_or_none()
