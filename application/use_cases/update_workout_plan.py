"""
UpdateWorkoutPlan Use Case.

Applies administrative edits to an existing plan. Trainer/client relations
are only checked at creation and are not re-checked here.
"""

import logging
from typing import Any, Dict

from pydantic import ValidationError

from application.exceptions import PlanNotFoundError, PlanValidationError
from application.ports import WorkoutPlanRepository
from application.services import prepare_for_write
from domain.models import WorkoutPlan

logger = logging.getLogger(__name__)

# Fields callers may not overwrite through a partial update
_PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at"})


class UpdateWorkoutPlanUseCase:
    """
    Use case for updating workout plans.

    Every update is a whole-document write: the stored plan is loaded,
    the changes are merged and re-validated, the session cap is enforced,
    total planned sessions are recomputed and the result replaces the
    stored document.

    Usage:
        >>> use_case = UpdateWorkoutPlanUseCase(plan_repo=plan_repo)
        >>> plan = use_case.execute("plan-1", {"total_weeks": 8})
    """

    def __init__(self, plan_repo: WorkoutPlanRepository) -> None:
        self._plan_repo = plan_repo

    def execute(self, plan_id: str, changes: Dict[str, Any]) -> WorkoutPlan:
        """
        Apply a partial set of field changes to a stored plan.

        Args:
            plan_id: ID of the plan to update
            changes: Field name -> new value

        Returns:
            The stored plan after the update.

        Raises:
            PlanNotFoundError: If the plan does not exist.
            PlanValidationError: If a change is invalid.
            PlanCapacityError: If the result has too many sessions.
            PlanPersistenceError: If the write fails.
        """
        existing = self._plan_repo.get(plan_id)
        if existing is None:
            raise PlanNotFoundError(f"Workout plan {plan_id} not found")

        ignored = _PROTECTED_FIELDS.intersection(changes)
        if ignored:
            logger.debug(f"Ignoring protected fields in update: {sorted(ignored)}")

        data = existing.model_dump()
        data.update({k: v for k, v in changes.items() if k not in _PROTECTED_FIELDS})

        try:
            updated = WorkoutPlan.model_validate(data)
        except ValidationError as e:
            error = PlanValidationError.from_pydantic(e)
            logger.warning(f"Update of plan {plan_id} rejected: {error.errors}")
            raise error from e

        return self.execute_plan(updated)

    def execute_plan(self, plan: WorkoutPlan) -> WorkoutPlan:
        """
        Write a complete plan back to storage.

        Args:
            plan: Plan to store (must have an ID)

        Returns:
            The stored plan.

        Raises:
            PlanValidationError: If the plan has no ID or a field is invalid.
            PlanCapacityError: If the plan has too many sessions.
            PlanPersistenceError: If the write fails.
        """
        if not plan.id:
            raise PlanValidationError(
                "Cannot update workout plan without ID", ["id: required for update"]
            )

        try:
            # model_copy results skip field validation
            plan = WorkoutPlan.model_validate(plan.model_dump())
        except ValidationError as e:
            error = PlanValidationError.from_pydantic(e)
            logger.warning(f"Write of plan {plan.id} rejected: {error.errors}")
            raise error from e

        prepared = prepare_for_write(plan)
        logger.info(f"Updating plan {prepared.id}")
        return self._plan_repo.update(prepared)
