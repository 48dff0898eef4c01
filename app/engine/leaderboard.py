"""
Leaderboard — one ranked row per player profile.

Ranking
-------
Rows are sorted by average score (descending) with total goals
(descending) as the only tie-breaker.  The sort is stable, so rows equal
on both keys keep the order of the profile collection.  Ranks are the
1-based sorted positions: no gaps and no shared ranks.

Players without past sessions get an all-zero row and sort to the bottom.
"""

from __future__ import annotations

import datetime
from typing import Sequence

from app.db.repositories.profile import ProfileRepository
from app.db.repositories.training_session import TrainingSessionRepository
from app.db.store import DataStore
from app.engine.summary import SCORE_DECIMALS
from app.engine.temporal import round_half_up
from app.models.profile import PlayerProfile
from app.models.training_session import TrainingSession
from app.schemas.leaderboard import LeaderboardEntry

SPEED_DECIMALS = 2


def _mean(values: Sequence[float], places: int) -> float:
    if not values:
        return 0.0
    return round_half_up(sum(values) / len(values), places)


def _build_entry(profile: PlayerProfile, sessions: Sequence[TrainingSession]) -> LeaderboardEntry:
    """Aggregate one player's past sessions into an unranked row."""
    return LeaderboardEntry(rank=0, player_id=profile.id, first_name=profile.first_name,
                            last_name=profile.last_name, center_name=profile.center_name,
                            total_sessions=len(sessions), avg_score=_mean([s.score for s in sessions], SCORE_DECIMALS),
                            total_goals=sum(s.number_of_goals for s in sessions),
                            best_streak=max((s.best_streak for s in sessions), default=0),
                            total_balls=sum(s.number_of_balls for s in sessions),
                            avg_speed_of_play=_mean([s.avg_speed_of_play for s in sessions], SPEED_DECIMALS), )


def rank_entries(entries: Sequence[LeaderboardEntry]) -> list[LeaderboardEntry]:
    """Sort rows by (avg_score, total_goals) descending and assign ranks."""
    ordered = sorted(entries, key=lambda e: (-e.avg_score, -e.total_goals))
    return [entry.model_copy(update={ "rank": position }) for position, entry in enumerate(ordered, start=1)]


def compute_leaderboard(store: DataStore, now: datetime.datetime) -> list[LeaderboardEntry]:
    """Build the leaderboard over every profile in *store*.

    Args:
        store: Record store.
        now: Reference instant; only sessions started before it count.

    Returns:
        Ranked rows, exactly one per profile.
    """
    sessions = TrainingSessionRepository(store)
    entries = [_build_entry(p, sessions.get_past_for_player(p.id, now)) for p in ProfileRepository(store).get_all()]
    return rank_entries(entries)
