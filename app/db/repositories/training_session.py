"""
Training session repository.

Handles lookups over the session collection of a :class:`DataStore`.
Includes the past-session selection shared by the summary and
leaderboard engines.
"""

import datetime
from typing import Optional

from app.db.store import DataStore
from app.engine.temporal import is_past
from app.models.training_session import TrainingSession
from app.schemas.filters import SessionFilter


class TrainingSessionRepository:
    """Repository for TrainingSession lookups."""

    def __init__(self, store: DataStore):
        self.store = store

    def get_by_id(self, session_id: str) -> Optional[TrainingSession]:
        return next((s for s in self.store.sessions if s.id == session_id), None)

    def get_for_player(self, player_id: str, now: datetime.datetime,
                       session_filter: SessionFilter = SessionFilter.PAST, ) -> list[TrainingSession]:
        """Sessions of *player_id*, newest first.

        With ``SessionFilter.PAST`` only sessions that started strictly
        before *now* are kept.  Unknown players yield an empty list.
        """
        sessions = [s for s in self.store.sessions if s.player_id == player_id]
        if session_filter == SessionFilter.PAST:
            sessions = [s for s in sessions if is_past(s.start_time, now)]
        return sorted(sessions, key=lambda s: s.start_time, reverse=True)

    def get_past_for_player(self, player_id: str, now: datetime.datetime) -> list[TrainingSession]:
        return self.get_for_player(player_id, now, SessionFilter.PAST)

    def trainer_names(self) -> set[str]:
        return { s.trainer_name for s in self.store.sessions }
