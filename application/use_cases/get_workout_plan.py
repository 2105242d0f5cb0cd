"""
GetWorkoutPlan Use Case.

Read-side operations: single plan lookup, stats projection and
filtered listing over the indexed plan fields.
"""

import logging
from typing import List, Optional

from application.exceptions import PlanNotFoundError
from application.ports import PlanFilters, WorkoutPlanRepository
from domain.models import PlanStats, WorkoutPlan

logger = logging.getLogger(__name__)


class GetWorkoutPlanUseCase:
    """
    Use case for reading workout plans.

    Usage:
        >>> use_case = GetWorkoutPlanUseCase(plan_repo=plan_repo)
        >>> stats = use_case.get_stats("plan-1")
        >>> active = use_case.list_plans(PlanFilters(client_id="c1", is_active=True))
    """

    def __init__(self, plan_repo: WorkoutPlanRepository) -> None:
        self._plan_repo = plan_repo

    def get(self, plan_id: str) -> WorkoutPlan:
        """
        Get a plan by ID.

        Raises:
            PlanNotFoundError: If the plan does not exist.
        """
        plan = self._plan_repo.get(plan_id)
        if plan is None:
            raise PlanNotFoundError(f"Workout plan {plan_id} not found")
        return plan

    def get_stats(self, plan_id: str) -> PlanStats:
        """
        Get the progress/scheduling projection for a plan.

        Raises:
            PlanNotFoundError: If the plan does not exist.
        """
        return self.get(plan_id).get_stats()

    def list_plans(self, filters: Optional[PlanFilters] = None) -> List[WorkoutPlan]:
        """List plans matching the filters (all plans up to the limit if None)."""
        filters = filters or PlanFilters()
        plans = self._plan_repo.get_list(filters)
        logger.debug(f"Listed {len(plans)} plans")
        return plans
