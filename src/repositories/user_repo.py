from __future__ import annotations

from sqlalchemy.orm import Session
from sqlalchemy import select, and_

from src.entities.user import User
from src.repositories.base_repo import BaseRepository


class UserRepository(BaseRepository[User]):
    def __init__(self, session: Session) -> None:
        super().__init__(session=session, model=User)

    def get_active_players(self) -> list[User]:
        """Active users with the player role, ordered by name."""
        stmt = (
            select(User)
            .where(and_(User.role == "player", User.is_active.is_(True)))
            .order_by(User.name, User.id)
        )
        return self._all(stmt)
