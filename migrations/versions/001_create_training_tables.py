"""create training tables

Revision ID: 001
Revises:
Create Date: 2026-10-18 00:00:00.000000

Adds the tables the reporting service reads from: users, workout logs,
weekly points, training templates and assignments, and training sessions.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the training tables and indexes.

    Columns match the entities under src/entities/.
    """
    op.create_table(
        "users",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("position", sa.String(50), nullable=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="player"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_index("ix_users_name", "users", ["name"])
    op.create_index("ix_users_role", "users", ["role"])

    op.create_table(
        "workout_logs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=True),
        sa.Column("completion_percentage", sa.Float(), nullable=True),
        sa.Column("source", sa.String(10), nullable=False, server_default="player"),
        sa.Column("plan_name", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    # Reports filter logs by player and date range
    op.create_index("ix_workout_logs_user_id", "workout_logs", ["user_id"])
    op.create_index("ix_workout_logs_date", "workout_logs", ["date"])

    op.create_table(
        "player_weekly_points",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("week", sa.String(8), nullable=False),
        sa.Column("total_points", sa.Float(), nullable=False, server_default="0"),
        sa.Column("target_points", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("workout_days", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("team_training_days", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "week", name="uq_weekly_points_user_week"),
    )
    op.create_index("ix_player_weekly_points_user_id", "player_weekly_points", ["user_id"])
    op.create_index("ix_player_weekly_points_week", "player_weekly_points", ["week"])

    op.create_table(
        "training_templates",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("frequency_per_week", sa.String(20), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "training_assignments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "template_id",
            sa.Integer(),
            sa.ForeignKey("training_templates.id"),
            nullable=False,
        ),
        sa.Column("player_id", sa.String(36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("assigned_by", sa.String(36), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_training_assignments_player_id", "training_assignments", ["player_id"]
    )

    op.create_table(
        "training_sessions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(255), nullable=False, server_default=""),
        sa.Column(
            "session_category", sa.String(10), nullable=False, server_default="team"
        ),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("start_time", sa.String(5), nullable=False),
        sa.Column("end_time", sa.String(5), nullable=False),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("address", sa.String(255), nullable=True),
        sa.Column("attendees", sa.JSON(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_training_sessions_session_category",
        "training_sessions",
        ["session_category"],
    )
    op.create_index("ix_training_sessions_date", "training_sessions", ["date"])


def downgrade() -> None:
    """Drop the training tables and their indexes."""
    op.drop_index("ix_training_sessions_date", table_name="training_sessions")
    op.drop_index(
        "ix_training_sessions_session_category", table_name="training_sessions"
    )
    op.drop_table("training_sessions")
    op.drop_index(
        "ix_training_assignments_player_id", table_name="training_assignments"
    )
    op.drop_table("training_assignments")
    op.drop_table("training_templates")
    op.drop_index("ix_player_weekly_points_week", table_name="player_weekly_points")
    op.drop_index("ix_player_weekly_points_user_id", table_name="player_weekly_points")
    op.drop_table("player_weekly_points")
    op.drop_index("ix_workout_logs_date", table_name="workout_logs")
    op.drop_index("ix_workout_logs_user_id", table_name="workout_logs")
    op.drop_table("workout_logs")
    op.drop_index("ix_users_role", table_name="users")
    op.drop_index("ix_users_name", table_name="users")
    op.drop_table("users")
