"""
Player profile repository.

Lookups over the profile collection of a :class:`DataStore`.
"""

from typing import Optional

from app.db.store import DataStore
from app.models.profile import PlayerProfile


class ProfileRepository:
    """Repository for PlayerProfile lookups."""

    def __init__(self, store: DataStore):
        """
        Initialize repository with a record store.

        Args:
            store: In-memory record store
        """
        self.store = store

    def get_by_id(self, player_id: str) -> Optional[PlayerProfile]:
        """
        Get a player by ID.

        Args:
            player_id: Player ID

        Returns:
            PlayerProfile if found, None otherwise
        """
        return next((p for p in self.store.profiles if p.id == player_id), None)

    def get_by_email(self, email: str) -> Optional[PlayerProfile]:
        """
        Get a player by email address, ignoring case.

        Args:
            email: Player email

        Returns:
            The first matching PlayerProfile, None otherwise
        """
        wanted = email.lower()
        return next((p for p in self.store.profiles if p.email.lower() == wanted), None)

    def get_all(self) -> list[PlayerProfile]:
        """
        Get all players in collection order.

        Returns:
            List of players
        """
        return list(self.store.profiles)

    def exists(self, player_id: str) -> bool:
        """
        Check if a player with the given ID exists.

        Args:
            player_id: Player ID to check

        Returns:
            True if the player exists, False otherwise
        """
        return self.get_by_id(player_id) is not None
