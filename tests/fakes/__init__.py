"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeWorkoutPlanRepository, create_user_repo

    # Direct instantiation
    repo = FakeWorkoutPlanRepository()
    repo.seed([plan])

    # Factory function with an approved trainer and an assigned client
    users = create_user_repo(trainer_id="t1", client_id="c1")
"""
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from domain.models import PlanFrequency, User, UserRole, WorkoutPlan

# Import all fake implementations
from tests.fakes.user_repository import FakeUserRepository
from tests.fakes.workout_plan_repository import FakeWorkoutPlanRepository


# =============================================================================
# Factory Functions
# =============================================================================


def make_plan(**overrides) -> WorkoutPlan:
    """
    Build a valid WorkoutPlan, overriding any field by keyword.

    Defaults: trainer "trainer-1", client "client-1", 3x frequency with
    three sessions, 4 weeks, starting 2026-01-05.
    """
    data = {
        "name": "Strength Foundations",
        "client_id": "client-1",
        "trainer_id": "trainer-1",
        "frequency": PlanFrequency.THREE_PER_WEEK,
        "start_date": datetime(2026, 1, 5, tzinfo=timezone.utc),
        "session_ids": ["session-a", "session-b", "session-c"],
    }
    data.update(overrides)
    return WorkoutPlan(**data)


def create_user_repo(
    *,
    trainer_id: str = "trainer-1",
    client_id: str = "client-1",
    trainer_approved: bool = True,
    assigned_trainer_id: Optional[str] = None,
    extra_users: Optional[List[User]] = None,
) -> FakeUserRepository:
    """
    Create a FakeUserRepository with a trainer and a client.

    Args:
        trainer_id: ID of the seeded trainer
        client_id: ID of the seeded client
        trainer_approved: Whether the trainer is approved
        assigned_trainer_id: Trainer assigned to the client (defaults to trainer_id)
        extra_users: Additional users to seed

    Returns:
        Pre-populated FakeUserRepository
    """
    repo = FakeUserRepository()
    repo.seed([
        User(id=trainer_id, role=UserRole.TRAINER, is_approved=trainer_approved, name="Test Trainer"),
        User(
            id=client_id,
            role=UserRole.CLIENT,
            assigned_trainer_id=assigned_trainer_id or trainer_id,
            name="Test Client",
        ),
    ])
    if extra_users:
        repo.seed(extra_users)
    return repo


def create_plan_repo(
    *,
    client_id: str = "client-1",
    trainer_id: str = "trainer-1",
    num_plans: int = 0,
) -> FakeWorkoutPlanRepository:
    """
    Create a FakeWorkoutPlanRepository with optional pre-populated plans.

    Generated plans start one week apart; every other plan is inactive.

    Args:
        client_id: Client for generated plans
        trainer_id: Trainer for generated plans
        num_plans: Number of sample plans to create

    Returns:
        Pre-populated FakeWorkoutPlanRepository
    """
    repo = FakeWorkoutPlanRepository()

    if num_plans > 0:
        start = datetime(2026, 1, 5, tzinfo=timezone.utc)
        plans = []
        for i in range(num_plans):
            plans.append(
                make_plan(
                    name=f"Test Plan {i + 1}",
                    client_id=client_id,
                    trainer_id=trainer_id,
                    start_date=start + timedelta(weeks=i),
                    is_active=i % 2 == 0,
                ).with_planned_sessions()
            )
        repo.seed(plans)

    return repo


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Fake implementations
    "FakeWorkoutPlanRepository",
    "FakeUserRepository",
    # Factory functions
    "make_plan",
    "create_user_repo",
    "create_plan_repo",
]
