"""
Business rules checked before a workout plan is written.

Validates plans against:
- Session capacity for the plan frequency (every write)
- Trainer/client relations (creation only)

The relation check takes both users as explicit parameters; loading them
is the caller's responsibility.
"""

import logging
from typing import Optional

from application.exceptions import PlanCapacityError, PlanReferenceError
from domain.models import PlanFrequency, User, WorkoutPlan

logger = logging.getLogger(__name__)


def max_sessions_for(frequency: PlanFrequency | str) -> int:
    """Maximum session references allowed for a frequency (3x -> 3, ...)."""
    return PlanFrequency(frequency).sessions_per_week


def enforce_session_capacity(plan: WorkoutPlan) -> None:
    """
    Ensure the plan does not reference more sessions than its frequency allows.

    Raises:
        PlanCapacityError: If the session count exceeds the cap.
    """
    cap = max_sessions_for(plan.frequency)
    if plan.session_count > cap:
        logger.warning(
            "Plan '%s' has %d sessions, cap for %s is %d",
            plan.name,
            plan.session_count,
            plan.frequency.value,
            cap,
        )
        raise PlanCapacityError(
            f"Maximum {cap} sessions for frequency {plan.frequency.value}",
            [f"session_ids: {plan.session_count} given, at most {cap} allowed"],
        )


def validate_plan_relations(
    plan: WorkoutPlan,
    trainer: Optional[User],
    client: Optional[User],
) -> None:
    """
    Check that the trainer may create this plan for this client.

    Args:
        plan: Plan about to be created.
        trainer: User referenced by plan.trainer_id (None if not found).
        client: User referenced by plan.client_id (None if not found).

    Raises:
        PlanReferenceError: If the trainer is missing, not a trainer or not
            approved; if the client is missing or not a client; or if the
            client is assigned to a different trainer.
    """
    if trainer is None or not trainer.is_approved_trainer:
        raise PlanReferenceError(
            "Trainer must be approved to create plans",
            [f"trainer_id: {plan.trainer_id} is not an approved trainer"],
        )

    if client is None or not client.is_client:
        raise PlanReferenceError(
            "Invalid client",
            [f"client_id: {plan.client_id} is not a client"],
        )

    if client.assigned_trainer_id != plan.trainer_id:
        raise PlanReferenceError(
            "Client is not assigned to this trainer",
            [
                f"client_id: {plan.client_id} is assigned to "
                f"{client.assigned_trainer_id or 'no trainer'}"
            ],
        )


def prepare_for_write(plan: WorkoutPlan) -> WorkoutPlan:
    """
    Apply the rules every write goes through.

    Enforces session capacity, then returns a copy with
    total_sessions_planned recomputed from the session list and
    completion_rate recomputed from the new total.

    Raises:
        PlanCapacityError: If the session count exceeds the cap.
    """
    enforce_session_capacity(plan)
    return plan.with_planned_sessions().calculate_completion_rate()
