"""
In-memory record store.

Holds the three record collections the analytics and booking engines
work on.  A store is an explicit object passed to repositories and
engines, so each test can build its own.
"""

from __future__ import annotations

import threading
from typing import Iterable, Optional

from app.models.appointment import Appointment
from app.models.profile import PlayerProfile
from app.models.training_session import TrainingSession


class DataStore:
    """Owner of the profile, session and appointment collections.

    Only the booking operations write to ``appointments``.  Callers that
    mutate from several threads must hold ``mutation_lock``.
    """

    def __init__(self, profiles: Optional[Iterable[PlayerProfile]] = None,
                 sessions: Optional[Iterable[TrainingSession]] = None,
                 appointments: Optional[Iterable[Appointment]] = None, ):
        self.profiles: list[PlayerProfile] = list(profiles or [])
        self.sessions: list[TrainingSession] = list(sessions or [])
        self.appointments: list[Appointment] = list(appointments or [])
        self.mutation_lock = threading.Lock()

    def replace_with(self, other: DataStore) -> None:
        """Swap in the collections of *other* (used on data reload)."""
        with self.mutation_lock:
            self.profiles = list(other.profiles)
            self.sessions = list(other.sessions)
            self.appointments = list(other.appointments)

    def counts(self) -> dict[str, int]:
        return { "profiles": len(self.profiles), "sessions": len(self.sessions),
                 "appointments": len(self.appointments), }
