"""
Workout Plan Repository Interface (Port).

This module defines the abstract interface for workout plan persistence.
Implementations may use Supabase, in-memory storage, or other backends.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Protocol

from domain.models import PlanFrequency, PlanGoal, PlanLevel, WorkoutPlan


@dataclass
class PlanFilters:
    """
    Query filters over the indexed plan fields.

    Every filter is optional; unset filters do not constrain the query.
    Naive start_date bounds are treated as UTC.
    """

    client_id: Optional[str] = None
    trainer_id: Optional[str] = None
    is_active: Optional[bool] = None
    is_template: Optional[bool] = None
    frequency: Optional[PlanFrequency] = None
    level: Optional[PlanLevel] = None
    goal: Optional[PlanGoal] = None
    start_date_from: Optional[datetime] = None
    start_date_to: Optional[datetime] = None
    limit: int = 50


class WorkoutPlanRepository(Protocol):
    """
    Abstract interface for workout plan persistence operations.

    Writes are whole-document: ``update`` replaces every stored field with
    the plan's current values (last writer wins).
    """

    def insert(self, plan: WorkoutPlan) -> WorkoutPlan:
        """
        Insert a new plan.

        Args:
            plan: Plan to store. Any ID on it is ignored.

        Returns:
            The stored plan with its generated ID and timestamps.

        Raises:
            PlanPersistenceError: If the write fails.
        """
        ...

    def update(self, plan: WorkoutPlan) -> WorkoutPlan:
        """
        Replace an existing plan.

        Args:
            plan: Plan to store (must have an ID).

        Returns:
            The stored plan with a refreshed updated_at.

        Raises:
            PlanNotFoundError: If no plan has the given ID.
            PlanPersistenceError: If the write fails.
        """
        ...

    def get(self, plan_id: str) -> Optional[WorkoutPlan]:
        """
        Get a single plan by ID.

        Returns:
            The plan, or None if not found.
        """
        ...

    def get_list(self, filters: Optional[PlanFilters] = None) -> List[WorkoutPlan]:
        """
        List plans matching the filters.

        Returns:
            Plans ordered by start_date descending, at most ``filters.limit``.
        """
        ...
