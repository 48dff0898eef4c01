"""Business logic services."""

from app.services.player_service import PlayerService
from app.services.booking_service import BookingService

__all__ = [
    "PlayerService",
    "BookingService",
]
