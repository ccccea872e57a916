"""
Entity for scheduled training sessions.
"""

from __future__ import annotations

import datetime as dt

from sqlalchemy import JSON, Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.entities.base import Base


class TrainingSession(Base):
    """
    A scheduled team or private training session.

    ``attendees`` holds the RSVP list as JSON:
    ``[{"user_id": ..., "user_name": ..., "status": "going"}, ...]``
    with status one of going, maybe, not-going.
    """

    __tablename__ = "training_sessions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    session_category: Mapped[str] = mapped_column(
        String(10), nullable=False, default="team", index=True
    )  # team, private
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    start_time: Mapped[str] = mapped_column(String(5), nullable=False)  # HH:MM
    end_time: Mapped[str] = mapped_column(String(5), nullable=False)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    attendees: Mapped[list | None] = mapped_column(JSON, nullable=True)

    def going_user_ids(self) -> set[str]:
        """IDs of attendees who confirmed with status ``going``."""
        return {
            a.get("user_id")
            for a in (self.attendees or [])
            if a.get("status") == "going" and a.get("user_id")
        }
