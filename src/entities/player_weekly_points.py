"""
Entity for per-player weekly points totals.
"""

from __future__ import annotations

from sqlalchemy import Float, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.entities.base import Base


class PlayerWeeklyPoints(Base):
    """
    Points a player earned in one ISO week against their weekly target.

    ``week`` is the ISO week key, e.g. ``2024-W05``.
    """

    __tablename__ = "player_weekly_points"
    __table_args__ = (UniqueConstraint("user_id", "week", name="uq_weekly_points_user_week"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id"), nullable=False, index=True
    )
    week: Mapped[str] = mapped_column(String(8), nullable=False, index=True)
    total_points: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    target_points: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    workout_days: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    team_training_days: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
