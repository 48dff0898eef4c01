"""
Player profile API schemas.
"""

from app.models.profile import PlayerProfile


class PlayerProfileResponse(PlayerProfile):
    """Profile as returned by the API, with the derived age in years."""

    age: int
