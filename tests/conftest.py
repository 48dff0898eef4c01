"""Shared fixtures: a fixed reference instant and record factories."""

import datetime
import itertools
import uuid

import pytest

from app.db.store import DataStore
from app.models.appointment import Appointment
from app.models.profile import PlayerProfile
from app.models.training_session import TrainingSession

UTC = datetime.timezone.utc

# Monday 2026-03-16, 12:30 UTC
NOW = datetime.datetime(2026, 3, 16, 12, 30, tzinfo=UTC)

_counter = itertools.count(1)


def _uuid() -> str:
    return str(uuid.UUID(int=next(_counter)))


@pytest.fixture
def now() -> datetime.datetime:
    return NOW


@pytest.fixture
def make_profile():
    def _make(**overrides) -> PlayerProfile:
        data = {
            "id": _uuid(),
            "email": "player@example.com",
            "first_name": "Test",
            "last_name": "Player",
            "phone": "+1-555-0000",
            "gender": "female",
            "dob": datetime.date(2010, 6, 1),
            "center_name": "Test Center",
            "created_at": datetime.datetime(2025, 1, 1, tzinfo=UTC),
        }
        data.update(overrides)
        return PlayerProfile(**data)

    return _make


@pytest.fixture
def make_session():
    def _make(player_id: str, start: datetime.datetime, **overrides) -> TrainingSession:
        data = {
            "id": _uuid(),
            "player_id": player_id,
            "trainer_name": "Coach Test",
            "start_time": start,
            "end_time": start + datetime.timedelta(hours=1),
            "score": 75.0,
            "number_of_goals": 20,
            "number_of_balls": 100,
            "best_streak": 10,
            "avg_speed_of_play": 3.5,
            "number_of_exercises": 5,
        }
        data.update(overrides)
        return TrainingSession(**data)

    return _make


@pytest.fixture
def make_appointment():
    def _make(player_id: str, start: datetime.datetime, trainer_name: str = "Coach Test",
              hours: float = 1.0) -> Appointment:
        return Appointment(id=_uuid(), player_id=player_id, trainer_name=trainer_name, start_time=start,
                           end_time=start + datetime.timedelta(hours=hours))

    return _make


@pytest.fixture
def store() -> DataStore:
    return DataStore()
