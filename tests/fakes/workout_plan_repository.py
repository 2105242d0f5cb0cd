"""
Fake Workout Plan Repository for testing.

This module provides an in-memory implementation of WorkoutPlanRepository
for fast, isolated testing without database dependencies.
"""
from datetime import datetime, timezone
from typing import Dict, List, Optional
import uuid

from application.exceptions import PlanNotFoundError, PlanPersistenceError
from application.ports import PlanFilters
from domain.models import WorkoutPlan


class FakeWorkoutPlanRepository:
    """
    In-memory fake implementation of WorkoutPlanRepository for testing.

    Stores plans in a dict keyed by plan ID. Supports seeding with
    test data, resets between tests, and simulated write failures.

    Usage:
        repo = FakeWorkoutPlanRepository()
        repo.seed([plan])
        repo.fail_writes = True  # next insert/update raises PlanPersistenceError
    """

    def __init__(self):
        """Initialize with empty storage."""
        self._plans: Dict[str, WorkoutPlan] = {}
        self.fail_writes = False
        self.write_count = 0

    def reset(self) -> None:
        """Clear all stored plans."""
        self._plans.clear()
        self.fail_writes = False
        self.write_count = 0

    def seed(self, plans: List[WorkoutPlan]) -> List[WorkoutPlan]:
        """
        Seed the repository with test data.

        Plans without an ID get a generated one. Returns the stored plans.
        """
        stored = []
        for plan in plans:
            plan_id = plan.id or str(uuid.uuid4())
            stored_plan = plan.model_copy(update={"id": plan_id}, deep=True)
            self._plans[plan_id] = stored_plan
            stored.append(stored_plan)
        return stored

    def get_all(self) -> List[WorkoutPlan]:
        """Get all stored plans (test helper)."""
        return list(self._plans.values())

    # =========================================================================
    # WorkoutPlanRepository Protocol Methods
    # =========================================================================

    def insert(self, plan: WorkoutPlan) -> WorkoutPlan:
        """Insert a plan into in-memory storage."""
        self._check_writable()
        now = datetime.now(timezone.utc)
        stored = plan.model_copy(
            update={"id": str(uuid.uuid4()), "created_at": now, "updated_at": now},
            deep=True,
        )
        self._plans[stored.id] = stored
        self.write_count += 1
        return stored.model_copy(deep=True)

    def update(self, plan: WorkoutPlan) -> WorkoutPlan:
        """Replace a stored plan."""
        self._check_writable()
        existing = self._plans.get(plan.id) if plan.id else None
        if existing is None:
            raise PlanNotFoundError(f"Workout plan {plan.id} not found")
        stored = plan.model_copy(
            update={
                "created_at": existing.created_at,
                "updated_at": datetime.now(timezone.utc),
            },
            deep=True,
        )
        self._plans[stored.id] = stored
        self.write_count += 1
        return stored.model_copy(deep=True)

    def get(self, plan_id: str) -> Optional[WorkoutPlan]:
        """Get a single plan by ID."""
        plan = self._plans.get(plan_id)
        return plan.model_copy(deep=True) if plan else None

    def get_list(self, filters: Optional[PlanFilters] = None) -> List[WorkoutPlan]:
        """List plans matching the filters."""
        filters = filters or PlanFilters()
        results = []
        for plan in self._plans.values():
            if filters.client_id is not None and plan.client_id != filters.client_id:
                continue
            if filters.trainer_id is not None and plan.trainer_id != filters.trainer_id:
                continue
            if filters.is_active is not None and plan.is_active != filters.is_active:
                continue
            if filters.is_template is not None and plan.is_template != filters.is_template:
                continue
            if filters.frequency is not None and plan.frequency != filters.frequency:
                continue
            if filters.level is not None and plan.level != filters.level:
                continue
            if filters.goal is not None and filters.goal not in plan.goals:
                continue
            if filters.start_date_from is not None and _as_utc(plan.start_date) < _as_utc(filters.start_date_from):
                continue
            if filters.start_date_to is not None and _as_utc(plan.start_date) > _as_utc(filters.start_date_to):
                continue
            results.append(plan.model_copy(deep=True))

        # Sort by start_date descending
        results.sort(key=lambda p: _as_utc(p.start_date), reverse=True)
        return results[:filters.limit]

    def _check_writable(self) -> None:
        if self.fail_writes:
            raise PlanPersistenceError("Simulated storage failure")


def _as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so naive and aware values compare."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
