"""
Entity for training plan templates.
"""

from __future__ import annotations

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.entities.base import Base


class TrainingTemplate(Base):
    """A reusable training plan that coaches assign to players."""

    __tablename__ = "training_templates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    frequency_per_week: Mapped[str | None] = mapped_column(
        String(20), nullable=True
    )  # free text: "3", "2-3"
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
