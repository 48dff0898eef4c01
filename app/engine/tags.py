"""
Session tags — rule-based highlight labels for a training session.

Each family (score, goal conversion, streak) contributes at most one tag,
the highest threshold reached.  Tempo, volume and variety are single
thresholds.
"""

from app.models.training_session import TrainingSession
from app.schemas.training_session import SessionTag

# ======================================================================
# Thresholds
# ======================================================================

_SCORE_TIERS: list[tuple[float, str, str]] = [(95.0, "🏆", "Elite Performance"), (90.0, "🔥", "On Fire"),
                                              (80.0, "💪", "Strong Session"), ]

# Goals per ball played.
_GOAL_RATE_TIERS: list[tuple[float, str, str]] = [(0.4, "🎯", "Sharpshooter"), (0.3, "⚽", "Clinical Finisher"), ]

_STREAK_TIERS: list[tuple[int, str, str]] = [(40, "🔗", "Streak Machine"), (25, "⚡", "Hot Streak"), ]

SPEED_HIGH_TEMPO = 5.0
BALLS_HIGH_VOLUME = 200
EXERCISES_WELL_ROUNDED = 10


def _first_tier(value: float, tiers: list[tuple[float, str, str]]) -> SessionTag | None:
    for threshold, emoji, label in tiers:
        if value >= threshold:
            return SessionTag(emoji=emoji, label=label)
    return None


def goal_rate(session: TrainingSession) -> float:
    """Goals per ball; 0 when no balls were played."""
    if session.number_of_balls <= 0:
        return 0.0
    return session.number_of_goals / session.number_of_balls


def compute_session_tags(session: TrainingSession) -> list[SessionTag]:
    """Highlight tags for *session*, in display order."""
    tags: list[SessionTag] = []

    for value, tiers in ((session.score, _SCORE_TIERS), (goal_rate(session), _GOAL_RATE_TIERS),
                         (session.best_streak, _STREAK_TIERS),):
        tag = _first_tier(value, tiers)
        if tag:
            tags.append(tag)

    if session.avg_speed_of_play >= SPEED_HIGH_TEMPO:
        tags.append(SessionTag(emoji="💨", label="High Tempo"))
    if session.number_of_balls >= BALLS_HIGH_VOLUME:
        tags.append(SessionTag(emoji="🏋️", label="High Volume"))
    if session.number_of_exercises >= EXERCISES_WELL_ROUNDED:
        tags.append(SessionTag(emoji="📋", label="Well-Rounded"))

    return tags
