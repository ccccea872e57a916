"""
Entity for logged workouts.
"""

from __future__ import annotations

import datetime as dt

from sqlalchemy import Date, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.entities.base import Base


class WorkoutLog(Base):
    """
    One workout a player completed on a given day.

    A player may log several workouts on the same date.
    """

    __tablename__ = "workout_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id"), nullable=False, index=True
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    duration: Mapped[int | None] = mapped_column(Integer, nullable=True)  # minutes
    completion_percentage: Mapped[float | None] = mapped_column(
        Float, nullable=True
    )  # 0-100
    source: Mapped[str] = mapped_column(
        String(10), nullable=False, default="player"
    )  # coach, player
    plan_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime, nullable=False, default=dt.datetime.utcnow
    )
