"""
Domain layer for workout plans.

This package contains pure domain models that are independent of
infrastructure concerns (database, external services).
"""

from domain.models import (
    LastCompletedSession,
    PlanFrequency,
    PlanGoal,
    PlanLevel,
    PlanProgress,
    PlanStats,
    User,
    UserRole,
    WorkoutPlan,
)

__all__ = [
    "WorkoutPlan",
    "PlanProgress",
    "LastCompletedSession",
    "PlanStats",
    "PlanFrequency",
    "PlanLevel",
    "PlanGoal",
    "User",
    "UserRole",
]
