"""
Trainer repository.

Trainers are not stored: they are the distinct ``trainer_name`` labels
found across training sessions and appointments.
"""

from app.db.repositories.appointment import AppointmentRepository
from app.db.repositories.training_session import TrainingSessionRepository
from app.db.store import DataStore


class TrainerRepository:
    """Derives the trainer list from session and appointment records."""

    def __init__(self, store: DataStore):
        self.sessions = TrainingSessionRepository(store)
        self.appointments = AppointmentRepository(store)

    def get_names(self) -> list[str]:
        """Distinct trainer names, sorted lexicographically."""
        return sorted(self.sessions.trainer_names() | self.appointments.trainer_names())
