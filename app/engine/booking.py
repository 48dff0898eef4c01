"""
Booking mutations — the only writes to the appointment collection.

Both operations are plain appends/removals.  Chronological validation
and conflict checks belong to the caller (see
:class:`app.services.booking_service.BookingService`), which also
serializes calls through ``store.mutation_lock``.
"""

import datetime
import uuid

from app.db.repositories.appointment import AppointmentRepository
from app.db.store import DataStore
from app.models.appointment import Appointment


def create_appointment(store: DataStore, player_id: str, trainer_name: str, start: datetime.datetime,
                       end: datetime.datetime, ) -> Appointment:
    """Append a new appointment with a fresh UUID and return it."""
    entry = Appointment(id=str(uuid.uuid4()), player_id=player_id, trainer_name=trainer_name, start_time=start,
                        end_time=end, )
    return AppointmentRepository(store).create(entry)


def cancel_appointment(store: DataStore, appointment_id: str) -> bool:
    """Remove the appointment if present.  Returns whether one was removed."""
    return AppointmentRepository(store).delete(appointment_id)
