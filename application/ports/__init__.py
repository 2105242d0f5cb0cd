"""
Repository Interfaces (Ports) for workout plans.

This package defines abstract interfaces that decouple domain logic from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutPlanRepository, UserRepository

    class PlanService:
        def __init__(self, plan_repo: WorkoutPlanRepository, user_repo: UserRepository):
            self.plan_repo = plan_repo
            self.user_repo = user_repo
"""

# Workout plan persistence
from application.ports.workout_plan_repository import (
    PlanFilters,
    WorkoutPlanRepository,
)

# User lookups
from application.ports.user_repository import UserRepository

__all__ = [
    # Workout plans
    "WorkoutPlanRepository",
    "PlanFilters",
    # Users
    "UserRepository",
]
