"""
Supabase implementation of WorkoutPlanRepository.

This module provides the concrete Supabase implementation for workout plan
persistence, with a constructor-injected client.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import ValidationError
from supabase import Client

from application.exceptions import PlanNotFoundError, PlanPersistenceError
from application.ports.workout_plan_repository import PlanFilters
from domain.converters import db_row_to_plan, plan_to_db_row
from domain.models import WorkoutPlan

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "workout_plans"


class SupabaseWorkoutPlanRepository:
    """
    Supabase implementation of WorkoutPlanRepository protocol.

    All Supabase query logic for workout plans is encapsulated here.
    The client is injected via constructor for testability.

    Unlike read failures, write failures are never swallowed: they are
    logged and re-raised as PlanPersistenceError.
    """

    def __init__(self, client: Client, table: str = DEFAULT_TABLE):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
            table: Table holding plan documents
        """
        self._client = client
        self._table = table

    def insert(self, plan: WorkoutPlan) -> WorkoutPlan:
        """Insert a new plan and return it with its generated ID."""
        now = datetime.now(timezone.utc).isoformat()
        data = plan_to_db_row(plan)
        data["created_at"] = now
        data["updated_at"] = now

        try:
            result = self._client.table(self._table).insert(data).execute()
        except Exception as e:
            logger.error(f"Failed to insert workout plan '{plan.name}': {e}")
            _log_permission_hint(e)
            raise PlanPersistenceError(f"Failed to save workout plan: {e}") from e

        if not result.data:
            logger.error("Insert returned no rows for workout plan '%s'", plan.name)
            raise PlanPersistenceError("Failed to save workout plan: no row returned")

        saved = _row_to_plan(result.data[0])
        logger.info(f"Workout plan saved for client {plan.client_id}, id: {saved.id}")
        return saved

    def update(self, plan: WorkoutPlan) -> WorkoutPlan:
        """Replace the stored document for ``plan.id``."""
        if not plan.id:
            raise PlanPersistenceError("Cannot update workout plan without ID")

        data = plan_to_db_row(plan)
        data["updated_at"] = datetime.now(timezone.utc).isoformat()

        try:
            result = (
                self._client.table(self._table)
                .update(data)
                .eq("id", plan.id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to update workout plan {plan.id}: {e}")
            _log_permission_hint(e)
            raise PlanPersistenceError(f"Failed to update workout plan: {e}") from e

        if not result.data:
            raise PlanNotFoundError(f"Workout plan {plan.id} not found")

        logger.info(f"Workout plan updated: {plan.id}")
        return _row_to_plan(result.data[0])

    def get(self, plan_id: str) -> Optional[WorkoutPlan]:
        """Get a single plan by ID."""
        try:
            result = (
                self._client.table(self._table)
                .select("*")
                .eq("id", plan_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to get workout plan {plan_id}: {e}")
            raise PlanPersistenceError(f"Failed to load workout plan: {e}") from e

        if not result.data:
            return None
        return _row_to_plan(result.data[0])

    def get_list(self, filters: Optional[PlanFilters] = None) -> List[WorkoutPlan]:
        """List plans matching the filters, newest start date first."""
        filters = filters or PlanFilters()
        try:
            query = self._client.table(self._table).select("*")

            if filters.client_id is not None:
                query = query.eq("client_id", filters.client_id)
            if filters.trainer_id is not None:
                query = query.eq("trainer_id", filters.trainer_id)
            if filters.is_active is not None:
                query = query.eq("is_active", filters.is_active)
            if filters.is_template is not None:
                query = query.eq("is_template", filters.is_template)
            if filters.frequency is not None:
                query = query.eq("frequency", filters.frequency.value)
            if filters.level is not None:
                query = query.eq("level", filters.level.value)
            if filters.goal is not None:
                query = query.contains("goals", [filters.goal.value])
            if filters.start_date_from is not None:
                query = query.gte("start_date", filters.start_date_from.isoformat())
            if filters.start_date_to is not None:
                query = query.lte("start_date", filters.start_date_to.isoformat())

            result = query.order("start_date", desc=True).limit(filters.limit).execute()
        except Exception as e:
            logger.error(f"Failed to list workout plans: {e}")
            raise PlanPersistenceError(f"Failed to list workout plans: {e}") from e

        return [_row_to_plan(row) for row in result.data or []]


def _row_to_plan(row) -> WorkoutPlan:
    """Convert a stored row, reporting malformed rows as storage errors."""
    try:
        return db_row_to_plan(row)
    except ValidationError as e:
        logger.error(f"Malformed workout plan row {row.get('id')}: {e}")
        raise PlanPersistenceError(
            f"Stored workout plan {row.get('id')} is invalid", [str(e)]
        ) from e


def _log_permission_hint(error: Exception) -> None:
    error_msg = str(error)
    if "PGRST" in error_msg or "permission" in error_msg.lower() or "row-level security" in error_msg.lower():
        logger.error("RLS/Permissions error: Consider using SUPABASE_SERVICE_ROLE_KEY instead of SUPABASE_ANON_KEY for backend API")
