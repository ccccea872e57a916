"""
Entity linking a player to a training plan template.
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.entities.base import Base
from src.entities.training_template import TrainingTemplate


class TrainingAssignment(Base):
    """
    A template assigned to one player.

    A player can have several assignments over time; only ``active`` ones
    count towards expected workouts.
    """

    __tablename__ = "training_assignments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    template_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("training_templates.id"), nullable=False
    )
    player_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id"), nullable=False, index=True
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    assigned_by: Mapped[str | None] = mapped_column(String(36), nullable=True)

    template: Mapped[TrainingTemplate] = relationship(TrainingTemplate)
