"""
Player service.

Resolves players for the API (404 on unknown ids) and delegates the
analytics to the engines.
"""

import datetime
from typing import Optional

from fastapi import HTTPException, status

from app.db.repositories.appointment import AppointmentRepository
from app.db.repositories.profile import ProfileRepository
from app.db.repositories.training_session import TrainingSessionRepository
from app.db.store import DataStore
from app.engine.export import export_filename, export_sessions_csv
from app.engine.summary import SummaryConfig, compute_player_summary
from app.engine.temporal import compute_age
from app.models.appointment import Appointment
from app.models.profile import PlayerProfile
from app.models.training_session import TrainingSession
from app.schemas.filters import AppointmentFilter, SessionFilter
from app.schemas.profile import PlayerProfileResponse
from app.schemas.summary import PlayerSummary


class PlayerService:
    """Service for player lookups and per-player analytics."""

    def __init__(self, store: DataStore, now: datetime.datetime, summary_config: Optional[SummaryConfig] = None):
        """
        Initialize service.

        Args:
            store: In-memory record store
            now: Reference instant for past/future filtering
            summary_config: Optional summary window override
        """
        self.store = store
        self.now = now
        self.summary_config = summary_config
        self.profiles = ProfileRepository(store)
        self.sessions = TrainingSessionRepository(store)
        self.appointments = AppointmentRepository(store)

    def get_by_email(self, email: str) -> PlayerProfileResponse:
        """
        Get a player by email, ignoring case.

        Raises:
            HTTPException: If no player has this email
        """
        player = self.profiles.get_by_email(email)
        if not player:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Player not found")
        return self._to_response(player)

    def get_player(self, player_id: str) -> PlayerProfile:
        """
        Get a player by ID.

        Raises:
            HTTPException: If the player does not exist
        """
        player = self.profiles.get_by_id(player_id)
        if not player:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Player not found")
        return player

    def get_summary(self, player_id: str) -> PlayerSummary:
        self.get_player(player_id)
        return compute_player_summary(self.store, player_id, self.now, self.summary_config)

    def get_sessions(self, player_id: str, session_filter: SessionFilter) -> list[TrainingSession]:
        self.get_player(player_id)
        return self.sessions.get_for_player(player_id, self.now, session_filter)

    def get_appointments(self, player_id: str, appointment_filter: AppointmentFilter) -> list[Appointment]:
        self.get_player(player_id)
        return self.appointments.get_for_player(player_id, self.now, appointment_filter)

    def export_sessions(self, player_id: str, session_filter: SessionFilter) -> tuple[str, str]:
        """Return ``(filename, csv_text)`` for the player's sessions."""
        player = self.get_player(player_id)
        sessions = self.sessions.get_for_player(player_id, self.now, session_filter)
        return export_filename(player), export_sessions_csv(sessions)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _to_response(self, player: PlayerProfile) -> PlayerProfileResponse:
        return PlayerProfileResponse(**player.model_dump(), age=compute_age(player.dob, self.now.date()))
