"""Unit tests for the booking mutations."""

import datetime
import uuid

from app.db.repositories.appointment import AppointmentRepository
from app.db.store import DataStore
from app.engine.booking import cancel_appointment, create_appointment
from app.schemas.filters import AppointmentFilter

DAY = datetime.timedelta(days=1)
HOUR = datetime.timedelta(hours=1)


class TestCreateAppointment:
    def test_appends_and_returns_record(self, store, now):
        start = now + DAY
        entry = create_appointment(store, "p1", "Coach Test", start, start + HOUR)

        assert store.appointments == [entry]
        assert entry.player_id == "p1"
        assert entry.trainer_name == "Coach Test"
        assert entry.start_time == start
        assert uuid.UUID(entry.id)

    def test_ids_are_unique(self, store, now):
        a = create_appointment(store, "p1", "Coach Test", now + DAY, now + DAY + HOUR)
        b = create_appointment(store, "p1", "Coach Test", now + DAY, now + DAY + HOUR)
        assert a.id != b.id

    def test_does_not_validate(self, store, now):
        entry = create_appointment(store, "p1", "Coach Test", now - DAY, now - 2 * DAY)
        assert entry in store.appointments

    def test_round_trip_with_query(self, store, now):
        repo = AppointmentRepository(store)
        entry = create_appointment(store, "p1", "Coach New", now + DAY, now + DAY + HOUR)
        assert entry in repo.get_for_player("p1", now, AppointmentFilter.ALL)

        assert cancel_appointment(store, entry.id) is True
        assert entry not in repo.get_for_player("p1", now, AppointmentFilter.ALL)


class TestCancelAppointment:
    def test_unknown_id_returns_false(self, make_appointment, now):
        keep = make_appointment("p1", now + DAY)
        store = DataStore(appointments=[keep])
        assert cancel_appointment(store, "nonexistent-id") is False
        assert store.appointments == [keep]

    def test_removes_only_matching(self, make_appointment, now):
        a = make_appointment("p1", now + DAY)
        b = make_appointment("p1", now + 2 * DAY)
        store = DataStore(appointments=[a, b])
        assert cancel_appointment(store, a.id) is True
        assert store.appointments == [b]
