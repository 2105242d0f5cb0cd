"""
Application Use Cases for workout plans.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models and raise application exceptions

Usage:
    from application.use_cases import (
        CreateWorkoutPlanUseCase,
        UpdateWorkoutPlanUseCase,
        MarkSessionCompletedUseCase,
        GetWorkoutPlanUseCase,
    )

    create = CreateWorkoutPlanUseCase(plan_repo=plan_repo, user_repo=user_repo)
    plan = create.execute(plan)

    complete = MarkSessionCompletedUseCase(plan_repo=plan_repo)
    plan = complete.execute(plan.id, session_id="s1", week=1)

    stats = GetWorkoutPlanUseCase(plan_repo=plan_repo).get_stats(plan.id)
"""

from application.use_cases.create_workout_plan import CreateWorkoutPlanUseCase
from application.use_cases.get_workout_plan import GetWorkoutPlanUseCase
from application.use_cases.mark_session_completed import MarkSessionCompletedUseCase
from application.use_cases.update_workout_plan import UpdateWorkoutPlanUseCase

__all__ = [
    "CreateWorkoutPlanUseCase",
    "UpdateWorkoutPlanUseCase",
    "MarkSessionCompletedUseCase",
    "GetWorkoutPlanUseCase",
]
