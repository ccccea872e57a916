from __future__ import annotations

from typing import Optional
from sqlalchemy.orm import Session, joinedload
from sqlalchemy import select, and_

from src.entities.training_assignment import TrainingAssignment
from src.repositories.base_repo import BaseRepository


class TrainingAssignmentRepository(BaseRepository[TrainingAssignment]):
    def __init__(self, session: Session) -> None:
        super().__init__(session=session, model=TrainingAssignment)

    def get_active_for_player(self, player_id: str) -> Optional[TrainingAssignment]:
        """Most recent active assignment for a player, template loaded, or None."""
        stmt = (
            select(TrainingAssignment)
            .options(joinedload(TrainingAssignment.template))
            .where(
                and_(
                    TrainingAssignment.player_id == player_id,
                    TrainingAssignment.active.is_(True),
                )
            )
            .order_by(TrainingAssignment.start_date.desc(), TrainingAssignment.id.desc())
            .limit(1)
        )
        return self.session.execute(stmt).scalars().first()
