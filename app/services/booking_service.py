"""
Booking service.

Validates booking requests against the current instant and the trainer's
existing appointments, then calls the booking mutations.  Check and
write happen under ``store.mutation_lock`` so two concurrent requests
cannot both book the same slot.
"""

import datetime
import logging

from fastapi import HTTPException, status

from app.db.repositories.appointment import AppointmentRepository
from app.db.repositories.profile import ProfileRepository
from app.db.store import DataStore
from app.engine.booking import cancel_appointment, create_appointment
from app.engine.scheduling import find_conflicts
from app.engine.temporal import has_started
from app.models.appointment import Appointment
from app.schemas.appointment import AppointmentCreate

logger = logging.getLogger(__name__)


class BookingService:
    """Service for appointment booking and cancellation."""

    def __init__(self, store: DataStore, now: datetime.datetime, prevent_double_booking: bool = True):
        self.store = store
        self.now = now
        self.prevent_double_booking = prevent_double_booking
        self.profiles = ProfileRepository(store)
        self.appointments = AppointmentRepository(store)

    def book(self, player_id: str, data: AppointmentCreate) -> Appointment:
        # 1. Player must exist
        if not self.profiles.exists(player_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Player not found")

        # 2. Chronological checks
        if data.end_time <= data.start_time:
            logger.info("Rejected booking for player %s: end %s not after start %s", player_id, data.end_time,
                        data.start_time)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="End time must be after start time")
        if has_started(data.start_time, self.now):
            logger.info("Rejected booking for player %s: start %s is not in the future", player_id, data.start_time)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Appointment must be in the future")

        # 3. Conflict check and append as one critical section
        with self.store.mutation_lock:
            if self.prevent_double_booking:
                conflicts = find_conflicts(self.store, data.trainer_name, data.start_time, data.end_time)
                if conflicts:
                    logger.info("Rejected booking for player %s: trainer '%s' busy (%d overlapping)", player_id,
                                data.trainer_name, len(conflicts))
                    raise HTTPException(status_code=status.HTTP_409_CONFLICT,
                                        detail="Trainer is not available for the requested time", )

            entry = create_appointment(self.store, player_id, data.trainer_name, data.start_time, data.end_time)

        logger.info("Booked appointment %s: player %s with '%s' at %s", entry.id, player_id, entry.trainer_name,
                    entry.start_time.isoformat())
        return entry

    def cancel(self, player_id: str, appointment_id: str) -> None:
        with self.store.mutation_lock:
            entry = self.appointments.get_by_id(appointment_id)
            if not entry or entry.player_id != player_id:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Appointment not found")
            cancel_appointment(self.store, appointment_id)

        logger.info("Cancelled appointment %s of player %s", appointment_id, player_id)
