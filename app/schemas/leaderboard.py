"""
Leaderboard schemas.
"""

from pydantic import Field

from app.models.base import CamelModel


class LeaderboardEntry(CamelModel):
    """One ranked row per player profile.

    ``rank`` is the 1-based position after sorting by ``avg_score`` then
    ``total_goals`` (both descending); equal rows still get distinct ranks.
    """

    rank: int = Field(0, ge=0)
    player_id: str
    first_name: str
    last_name: str
    center_name: str
    total_sessions: int = 0
    avg_score: float = Field(0.0, description="Mean score, one decimal")
    total_goals: int = 0
    best_streak: int = 0
    total_balls: int = 0
    avg_speed_of_play: float = Field(0.0, description="Mean speed of play, two decimals")
