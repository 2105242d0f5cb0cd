"""
Supabase implementation of UserRepository.

Reads trainer/client profiles for plan relation checks.
"""
import logging
from typing import Optional

from pydantic import ValidationError
from supabase import Client

from application.exceptions import PlanPersistenceError
from domain.converters import db_row_to_user
from domain.models import User

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "profiles"


class SupabaseUserRepository:
    """Supabase implementation of UserRepository protocol."""

    def __init__(self, client: Client, table: str = DEFAULT_TABLE):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
            table: Table holding user profiles
        """
        self._client = client
        self._table = table

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Fetch a user by ID, or None if no profile exists."""
        try:
            result = (
                self._client.table(self._table)
                .select("id, role, is_approved, assigned_trainer_id, name, email")
                .eq("id", user_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to get user {user_id}: {e}")
            raise PlanPersistenceError(f"Failed to load user {user_id}: {e}") from e

        if not result.data:
            return None
        try:
            return db_row_to_user(result.data[0])
        except ValidationError as e:
            logger.error(f"Malformed profile row for user {user_id}: {e}")
            raise PlanPersistenceError(f"Stored profile {user_id} is invalid", [str(e)]) from e
