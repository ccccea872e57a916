"""
Shared test fixtures for teamtrainer-reports.

Provides:
- db_session: In-memory SQLite session with all tables created
- client: FastAPI TestClient with DB dependency override
- seed: helper for inserting players, workouts, points, plans and sessions
"""

import os

# Force sqlite for tests — must be set before any src imports.
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

import pytest
from datetime import date
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from src.entities.base import Base
from src.entities.player_weekly_points import PlayerWeeklyPoints
from src.entities.training_assignment import TrainingAssignment
from src.entities.training_session import TrainingSession
from src.entities.training_template import TrainingTemplate
from src.entities.user import User
from src.entities.workout_log import WorkoutLog
from src.repositories.base_repo import BaseRepository


@pytest.fixture
def db_session():
    """In-memory SQLite for unit tests. Never hits production DB."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)

    TestSession = sessionmaker(bind=engine)
    session = TestSession()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def client(db_session: Session):
    """FastAPI TestClient with DB dependency overridden to use in-memory SQLite."""
    from fastapi.testclient import TestClient
    from src.core.database import get_db
    from src.main import app

    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app, raise_server_exceptions=False) as tc:
        yield tc
    app.dependency_overrides.clear()


class Seeder:
    """Inserts rows with sensible defaults through BaseRepository.create."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def _save(self, obj):
        return BaseRepository(self.session, type(obj)).create(obj)

    def player(self, id_: str, name: str | None = None, position: str | None = None,
               role: str = "player", is_active: bool = True) -> User:
        return self._save(
            User(id=id_, name=name or id_, position=position, role=role,
                 is_active=is_active)
        )

    def workout(self, user_id: str, day: date, duration: int | None = 60,
                completion: float | None = 100) -> WorkoutLog:
        return self._save(
            WorkoutLog(user_id=user_id, date=day, duration=duration,
                       completion_percentage=completion)
        )

    def points(self, user_id: str, week: str, total: float, target: int) -> PlayerWeeklyPoints:
        return self._save(
            PlayerWeeklyPoints(user_id=user_id, week=week, total_points=total,
                               target_points=target)
        )

    def assignment(self, player_id: str, frequency: str | None,
                   start: date = date(2024, 1, 1), active: bool = True) -> TrainingAssignment:
        template = self._save(TrainingTemplate(name="Plan", frequency_per_week=frequency))
        return self._save(
            TrainingAssignment(template_id=template.id, player_id=player_id,
                               start_date=start, active=active)
        )

    def team_session(self, day: date, attendees: list | None = None,
                     category: str = "team", start: str = "18:00",
                     end: str = "19:30", location: str = "Main field") -> TrainingSession:
        return self._save(
            TrainingSession(title="Practice", session_category=category, date=day,
                            start_time=start, end_time=end, location=location,
                            attendees=attendees)
        )


@pytest.fixture
def seed(db_session: Session) -> Seeder:
    return Seeder(db_session)
