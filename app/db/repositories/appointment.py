"""
Appointment repository.

Handles reads and the two mutations (append, delete) of the appointment
collection of a :class:`DataStore`.
"""

import datetime
from typing import Optional

from app.db.store import DataStore
from app.engine.temporal import is_future
from app.models.appointment import Appointment
from app.schemas.filters import AppointmentFilter


class AppointmentRepository:
    """Repository for Appointment operations."""

    def __init__(self, store: DataStore):
        self.store = store

    def get_by_id(self, appointment_id: str) -> Optional[Appointment]:
        return next((a for a in self.store.appointments if a.id == appointment_id), None)

    def get_for_player(self, player_id: str, now: datetime.datetime,
                       appointment_filter: AppointmentFilter = AppointmentFilter.FUTURE, ) -> list[Appointment]:
        """Appointments of *player_id*, soonest first.

        With ``AppointmentFilter.FUTURE`` only appointments starting
        strictly after *now* are kept.  Unknown players yield an empty list.
        """
        appointments = [a for a in self.store.appointments if a.player_id == player_id]
        if appointment_filter == AppointmentFilter.FUTURE:
            appointments = [a for a in appointments if is_future(a.start_time, now)]
        return sorted(appointments, key=lambda a: a.start_time)

    def get_for_trainer(self, trainer_name: str) -> list[Appointment]:
        return [a for a in self.store.appointments if a.trainer_name == trainer_name]

    def trainer_names(self) -> set[str]:
        return { a.trainer_name for a in self.store.appointments }

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def create(self, entry: Appointment) -> Appointment:
        self.store.appointments.append(entry)
        return entry

    def delete(self, appointment_id: str) -> bool:
        for idx, entry in enumerate(self.store.appointments):
            if entry.id == appointment_id:
                del self.store.appointments[idx]
                return True
        return False
