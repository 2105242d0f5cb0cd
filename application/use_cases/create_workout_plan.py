"""
CreateWorkoutPlan Use Case.

Orchestrates plan creation: field validation, trainer/client relation
checks, session capacity, planned-session recomputation and insert.
"""

import logging
from typing import Any, Dict, Union

from pydantic import ValidationError

from application.exceptions import PlanReferenceError, PlanValidationError
from application.ports import UserRepository, WorkoutPlanRepository
from application.services import prepare_for_write, validate_plan_relations
from domain.models import WorkoutPlan

logger = logging.getLogger(__name__)


class CreateWorkoutPlanUseCase:
    """
    Use case for creating workout plans.

    Orchestrates the following workflow:
    1. Validate fields (pydantic)
    2. Load trainer and client and check their relation
    3. Enforce the frequency session cap
    4. Recompute total planned sessions
    5. Insert via repository

    Dependencies are injected via constructor for testability.

    Usage:
        >>> use_case = CreateWorkoutPlanUseCase(
        ...     plan_repo=plan_repo,
        ...     user_repo=user_repo,
        ... )
        >>> plan = use_case.execute({
        ...     "name": "Strength Block",
        ...     "client_id": "client-1",
        ...     "trainer_id": "trainer-1",
        ...     "start_date": "2026-01-05T00:00:00Z",
        ... })
        >>> plan.id
        '...'
    """

    def __init__(
        self,
        plan_repo: WorkoutPlanRepository,
        user_repo: UserRepository,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            plan_repo: Repository for persisting plans
            user_repo: Repository for looking up trainers and clients
        """
        self._plan_repo = plan_repo
        self._user_repo = user_repo

    def execute(self, plan: Union[WorkoutPlan, Dict[str, Any]]) -> WorkoutPlan:
        """
        Create a new workout plan.

        Args:
            plan: WorkoutPlan or raw field dict. Any ID is ignored.

        Returns:
            The stored plan with its generated ID.

        Raises:
            PlanValidationError: If fields are missing or invalid.
            PlanReferenceError: If the trainer/client relation is invalid.
            PlanCapacityError: If there are too many sessions for the frequency.
            PlanPersistenceError: If the insert fails.
        """
        new_plan = self._build(plan)

        trainer = self._user_repo.get_by_id(new_plan.trainer_id)
        client = self._user_repo.get_by_id(new_plan.client_id)
        try:
            validate_plan_relations(new_plan, trainer, client)
        except PlanReferenceError as e:
            logger.warning(f"Rejected plan '{new_plan.name}': {e}")
            raise

        new_plan = prepare_for_write(new_plan)

        logger.info(
            f"Creating plan '{new_plan.name}' for client {new_plan.client_id} "
            f"(trainer {new_plan.trainer_id})"
        )
        saved = self._plan_repo.insert(new_plan)
        logger.info(f"Plan created: {saved.id}")
        return saved

    def _build(self, plan: Union[WorkoutPlan, Dict[str, Any]]) -> WorkoutPlan:
        """Validate input into a fresh WorkoutPlan with no ID."""
        try:
            if isinstance(plan, WorkoutPlan):
                # Re-validate: model_copy/model_construct may have skipped checks
                data = plan.model_dump()
            else:
                data = dict(plan)
            data.pop("id", None)
            return WorkoutPlan.model_validate(data)
        except ValidationError as e:
            error = PlanValidationError.from_pydantic(e)
            logger.warning(f"Workout plan validation failed: {error.errors}")
            raise error from e
