"""
Domain models for workout plans.

This package contains pure domain models that are independent of
infrastructure concerns (database, external services).

These models represent the core business concepts:
- WorkoutPlan: The aggregate root, a trainer-authored plan for one client
- PlanProgress: Completed/planned counters and completion rate
- LastCompletedSession: Stamp of the latest completed session
- PlanStats: Read-only progress projection
- User: Trainer/client reference used for relation checks

Usage:
    >>> from datetime import datetime
    >>> from domain.models import WorkoutPlan, PlanFrequency

    >>> plan = WorkoutPlan(
    ...     name="Hypertrophy Phase 1",
    ...     client_id="client-1",
    ...     trainer_id="trainer-1",
    ...     frequency=PlanFrequency.FOUR_PER_WEEK,
    ...     start_date=datetime(2026, 1, 5),
    ... )

    >>> # Serialize to JSON
    >>> json_str = plan.model_dump_json(indent=2)

    >>> # Deserialize from JSON
    >>> plan = WorkoutPlan.model_validate_json(json_str)
"""

from domain.models.user import User, UserRole
from domain.models.workout_plan import (
    LastCompletedSession,
    PlanFrequency,
    PlanGoal,
    PlanLevel,
    PlanProgress,
    PlanStats,
    WorkoutPlan,
    completion_percentage,
)

__all__ = [
    # Main entities
    "WorkoutPlan",
    "PlanProgress",
    "LastCompletedSession",
    "PlanStats",
    "User",
    # Enums
    "PlanFrequency",
    "PlanLevel",
    "PlanGoal",
    "UserRole",
    # Helpers
    "completion_percentage",
]
