"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations can be injected into use
cases for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseWorkoutPlanRepository,
        SupabaseUserRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    plan_repo = SupabaseWorkoutPlanRepository(client)
    user_repo = SupabaseUserRepository(client)
"""

from infrastructure.db.user_repository import SupabaseUserRepository
from infrastructure.db.workout_plan_repository import SupabaseWorkoutPlanRepository

__all__ = [
    "SupabaseWorkoutPlanRepository",
    "SupabaseUserRepository",
]
