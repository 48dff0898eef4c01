"""API tests for appointment listing, booking and cancellation."""

import datetime

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_clock, get_store
from app.core.clock import FixedClock
from app.db.store import DataStore
from app.main import app

UTC = datetime.timezone.utc
PLAYER_ID = "8f14e45f-ea8e-4c1b-9d3b-1c2a7a3f0001"
OTHER_ID = "8f14e45f-ea8e-4c1b-9d3b-1c2a7a3f0002"
UNKNOWN_ID = "00000000-0000-4000-8000-000000000000"

# now is 2026-03-16 12:30 UTC (see conftest)
TOMORROW_10 = "2026-03-17T10:00:00Z"
TOMORROW_11 = "2026-03-17T11:00:00Z"
TOMORROW_12 = "2026-03-17T12:00:00Z"


@pytest.fixture
def booking_store(make_profile) -> DataStore:
    return DataStore(profiles=[make_profile(id=PLAYER_ID, email="a@example.com"),
                               make_profile(id=OTHER_ID, email="b@example.com")])


@pytest.fixture
def client(booking_store, now):
    app.dependency_overrides[get_store] = lambda: booking_store
    app.dependency_overrides[get_clock] = lambda: FixedClock(now)
    yield TestClient(app)
    app.dependency_overrides.clear()


def _book(client, player_id=PLAYER_ID, trainer="Coach Rivera", start=TOMORROW_10, end=TOMORROW_11):
    return client.post(f"/api/v1/players/{player_id}/appointments",
                       json={"trainerName": trainer, "startTime": start, "endTime": end})


class TestBooking:
    def test_create_then_list(self, client):
        response = _book(client)
        assert response.status_code == 201
        created = response.json()
        assert created["playerId"] == PLAYER_ID
        assert created["trainerName"] == "Coach Rivera"

        listed = client.get(f"/api/v1/players/{PLAYER_ID}/appointments", params={"filter": "all"}).json()
        assert [a["id"] for a in listed] == [created["id"]]

    def test_new_trainer_appears_in_schedules(self, client):
        _book(client, trainer="Coach Brand New")
        body = client.get("/api/v1/schedule", params={"date": "2026-03-17"}).json()
        assert [s["trainerName"] for s in body] == ["Coach Brand New"]
        slots = {s["startTime"][11:13]: s["available"] for s in body[0]["slots"]}
        assert slots["10"] is False
        assert slots["14"] is True

    def test_end_before_start_rejected(self, client):
        response = _book(client, start=TOMORROW_11, end=TOMORROW_10)
        assert response.status_code == 400
        assert response.json()["detail"] == "End time must be after start time"

    def test_past_start_rejected(self, client):
        response = _book(client, start="2026-03-16T12:00:00Z", end="2026-03-16T13:00:00Z")
        assert response.status_code == 400
        assert response.json()["detail"] == "Appointment must be in the future"

    def test_unknown_player(self, client):
        assert _book(client, player_id=UNKNOWN_ID).status_code == 404

    def test_missing_trainer_name(self, client):
        assert _book(client, trainer="   ").status_code == 422

    def test_double_booking_rejected(self, client, booking_store):
        assert _book(client).status_code == 201
        response = _book(client, player_id=OTHER_ID)
        assert response.status_code == 409
        assert len(booking_store.appointments) == 1

    def test_back_to_back_allowed(self, client):
        assert _book(client).status_code == 201
        assert _book(client, player_id=OTHER_ID, start=TOMORROW_11, end=TOMORROW_12).status_code == 201


class TestCancel:
    def test_cancel_then_gone(self, client):
        created = _book(client).json()
        response = client.delete(f"/api/v1/players/{PLAYER_ID}/appointments/{created['id']}")
        assert response.status_code == 204

        listed = client.get(f"/api/v1/players/{PLAYER_ID}/appointments", params={"filter": "all"}).json()
        assert listed == []

    def test_cancel_unknown(self, client):
        assert client.delete(f"/api/v1/players/{PLAYER_ID}/appointments/{UNKNOWN_ID}").status_code == 404

    def test_cancel_other_players_appointment(self, client, booking_store):
        created = _book(client).json()
        response = client.delete(f"/api/v1/players/{OTHER_ID}/appointments/{created['id']}")
        assert response.status_code == 404
        assert len(booking_store.appointments) == 1
