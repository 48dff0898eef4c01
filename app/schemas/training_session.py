"""
Training session API schemas.
"""

from app.models.base import CamelModel
from app.models.training_session import TrainingSession


class SessionTag(CamelModel):
    """A highlight label derived from a session's metrics."""

    emoji: str
    label: str


class TrainingSessionDetail(TrainingSession):
    """A training session together with its highlight tags."""

    tags: list[SessionTag] = []
