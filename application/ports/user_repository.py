"""
User Repository Interface (Port).

Plans only need to look users up by ID to check trainer/client relations.
"""
from typing import Optional, Protocol

from domain.models import User


class UserRepository(Protocol):
    """Read-only access to users."""

    def get_by_id(self, user_id: str) -> Optional[User]:
        """
        Fetch a user by ID.

        Args:
            user_id: Profile ID

        Returns:
            The user, or None if not found
        """
        ...
