"""
MarkSessionCompleted Use Case.

Records a completed session against a plan and persists the new progress.
"""

import logging
from datetime import datetime
from typing import Optional

from pydantic import ValidationError

from application.exceptions import PlanNotFoundError, PlanValidationError
from application.ports import WorkoutPlanRepository
from application.use_cases.update_workout_plan import UpdateWorkoutPlanUseCase
from domain.models import WorkoutPlan

logger = logging.getLogger(__name__)


class MarkSessionCompletedUseCase:
    """
    Use case for marking a plan session as completed.

    Increments the completed count, stamps the last completed session,
    recomputes the completion rate and writes the plan. Persistence
    failures are propagated, not recovered.

    Usage:
        >>> use_case = MarkSessionCompletedUseCase(plan_repo=plan_repo)
        >>> plan = use_case.execute("plan-1", session_id="s2", week=3)
        >>> plan.progress.completion_rate
        25
    """

    def __init__(self, plan_repo: WorkoutPlanRepository) -> None:
        self._plan_repo = plan_repo
        self._writer = UpdateWorkoutPlanUseCase(plan_repo=plan_repo)

    def execute(
        self,
        plan_id: str,
        session_id: str,
        week: int,
        *,
        completed_at: Optional[datetime] = None,
    ) -> WorkoutPlan:
        """
        Mark one session of the plan as completed.

        Args:
            plan_id: ID of the plan
            session_id: Session that was completed
            week: Plan week the session belonged to
            completed_at: Completion time (defaults to now)

        Returns:
            The stored plan with updated progress.

        Raises:
            PlanNotFoundError: If the plan does not exist.
            PlanValidationError: If session_id or week is invalid.
            PlanPersistenceError: If the write fails.
        """
        plan = self._plan_repo.get(plan_id)
        if plan is None:
            raise PlanNotFoundError(f"Workout plan {plan_id} not found")

        try:
            completed = plan.mark_session_completed(
                session_id, week, completed_at=completed_at
            )
        except ValidationError as e:
            raise PlanValidationError.from_pydantic(e) from e

        saved = self._writer.execute_plan(completed)
        logger.info(
            f"Session {session_id} completed on plan {plan_id} (week {week}): "
            f"{saved.progress.total_sessions_completed}/"
            f"{saved.progress.total_sessions_planned} "
            f"({saved.progress.completion_rate}%)"
        )
        return saved
