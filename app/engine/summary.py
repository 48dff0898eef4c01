"""
Player summary — dashboard aggregates over a player's training history.

The summary is always historical: only sessions that started strictly
before ``now`` take part.  On top of the all-time aggregates a trailing
window (30 days by default) is reported separately.

Every averaged value goes through :func:`round_half_up` so the summary
and the leaderboard round identically.
"""

from __future__ import annotations

import datetime
from typing import Optional, Sequence

from pydantic import BaseModel, Field

from app.db.repositories.training_session import TrainingSessionRepository
from app.db.store import DataStore
from app.engine.temporal import round_half_up, window_start
from app.models.training_session import TrainingSession
from app.schemas.summary import LastSessionSnapshot, PlayerSummary, RecentWindowStats

# ======================================================================
# Configuration
# ======================================================================

SCORE_DECIMALS = 1


class SummaryConfig(BaseModel):
    """Configuration for the summary computation."""

    window_days: int = Field(30, ge=1, le=365, description="Length of the trailing window in days")


DEFAULT_SUMMARY_CONFIG = SummaryConfig()


# ======================================================================
# Aggregation helpers
# ======================================================================


def _average_score(sessions: Sequence[TrainingSession]) -> float:
    """Mean score rounded to one decimal; 0 for no sessions."""
    if not sessions:
        return 0.0
    return round_half_up(sum(s.score for s in sessions) / len(sessions), SCORE_DECIMALS)


def _best_streak(sessions: Sequence[TrainingSession]) -> int:
    return max((s.best_streak for s in sessions), default=0)


def _snapshot(session: TrainingSession) -> LastSessionSnapshot:
    return LastSessionSnapshot(id=session.id, date=session.start_time, score=session.score,
                               trainer_name=session.trainer_name, )


def _window_stats(sessions: Sequence[TrainingSession], since: datetime.datetime) -> RecentWindowStats:
    """Aggregate the sessions that started at or after *since*."""
    recent = [s for s in sessions if s.start_time >= since]
    return RecentWindowStats(total_sessions=len(recent), total_balls=sum(s.number_of_balls for s in recent),
                             avg_score=_average_score(recent), total_goals=sum(s.number_of_goals for s in recent), )


# ======================================================================
# Main entry point
# ======================================================================


def compute_player_summary(store: DataStore, player_id: str, now: datetime.datetime,
                           config: Optional[SummaryConfig] = None, ) -> PlayerSummary:
    """Compute the dashboard summary of a player.

    Args:
        store: Record store.
        player_id: Player ID.  Unknown IDs give the all-zero summary.
        now: Reference instant separating past from future sessions.
        config: Optional :class:`SummaryConfig` override.

    Returns:
        :class:`PlayerSummary` with all-time totals, the latest session
        snapshot and the trailing-window stats.
    """
    cfg = config or DEFAULT_SUMMARY_CONFIG
    sessions = TrainingSessionRepository(store).get_past_for_player(player_id, now)

    return PlayerSummary(total_sessions=len(sessions), avg_score=_average_score(sessions),
                         best_streak_record=_best_streak(sessions),
                         last_session=_snapshot(sessions[0]) if sessions else None,
                         last_30_days=_window_stats(sessions, window_start(now, cfg.window_days)), )
