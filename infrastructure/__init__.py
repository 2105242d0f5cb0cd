"""
Infrastructure Layer for workout plans.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseUserRepository,
    SupabaseWorkoutPlanRepository,
)

__all__ = [
    "SupabaseWorkoutPlanRepository",
    "SupabaseUserRepository",
]
