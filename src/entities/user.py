"""
Entity for platform users (players, coaches, admins).
"""

from __future__ import annotations

import uuid

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from src.entities.base import Base


class User(Base):
    """
    A platform account.

    Only users with role ``player`` and ``is_active`` set make up the
    roster that reports are generated for.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, unique=True)
    position: Mapped[str | None] = mapped_column(String(50), nullable=True)
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default="player", index=True
    )  # player, coach, admin
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
