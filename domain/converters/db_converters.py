"""
Converters: Database row format <-> domain models.

Provides bidirectional conversion between Supabase database rows
and the WorkoutPlan / User domain models.

Database schema (workout_plans table):
- id: UUID
- client_id, trainer_id: Profile IDs
- name, description, notes, template_name: Text
- frequency, level: Text (enum values)
- goals, session_ids: Arrays of strings
- start_date, end_date: Timestamps
- current_week, total_weeks: Integers
- is_active, is_template: Booleans
- progress: JSONB (total_sessions_completed, total_sessions_planned, completion_rate)
- last_completed_session: JSONB (session_id, completed_at, week)
- created_at, updated_at: Timestamps

Database schema (profiles table, read-only here):
- id, role, is_approved, assigned_trainer_id, name, email
"""

from datetime import datetime
from typing import Any, Dict, Optional

from domain.models import User, WorkoutPlan


def _parse_datetime(value: Any) -> Optional[datetime]:
    """Parse datetime from various formats."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            # Python < 3.11 does not accept the Z suffix
            if value.endswith("Z"):
                value = value[:-1] + "+00:00"
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


def _format_datetime(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def db_row_to_plan(row: Dict[str, Any]) -> WorkoutPlan:
    """
    Convert a workout_plans row to a WorkoutPlan.

    Args:
        row: Row dict as returned by Supabase.

    Returns:
        Validated WorkoutPlan.

    Raises:
        pydantic.ValidationError: If the stored row violates model constraints.
    """
    last_completed = row.get("last_completed_session") or None
    if last_completed:
        last_completed = {
            **last_completed,
            "completed_at": _parse_datetime(last_completed.get("completed_at")),
        }

    return WorkoutPlan.model_validate(
        {
            "id": row.get("id"),
            "client_id": row.get("client_id"),
            "trainer_id": row.get("trainer_id"),
            "name": row.get("name"),
            "description": row.get("description"),
            "notes": row.get("notes"),
            "frequency": row.get("frequency") or "3x",
            "session_ids": row.get("session_ids") or [],
            "start_date": _parse_datetime(row.get("start_date")),
            "end_date": _parse_datetime(row.get("end_date")),
            "is_active": row.get("is_active", True),
            "is_template": row.get("is_template", False),
            "template_name": row.get("template_name"),
            "goals": row.get("goals") or [],
            "level": row.get("level") or "beginner",
            "current_week": row.get("current_week") or 1,
            "total_weeks": row.get("total_weeks") or 4,
            "last_completed_session": last_completed,
            "progress": row.get("progress") or {},
            "created_at": _parse_datetime(row.get("created_at")),
            "updated_at": _parse_datetime(row.get("updated_at")),
        }
    )


def plan_to_db_row(plan: WorkoutPlan) -> Dict[str, Any]:
    """
    Convert a WorkoutPlan to a workout_plans row.

    The id and timestamps are left out; the repository decides whether
    to insert or update and stamps the times itself.
    """
    last_completed = None
    if plan.last_completed_session:
        last_completed = plan.last_completed_session.model_dump(mode="json")

    return {
        "client_id": plan.client_id,
        "trainer_id": plan.trainer_id,
        "name": plan.name,
        "description": plan.description,
        "notes": plan.notes,
        "frequency": plan.frequency.value,
        "session_ids": list(plan.session_ids),
        "start_date": _format_datetime(plan.start_date),
        "end_date": _format_datetime(plan.end_date),
        "is_active": plan.is_active,
        "is_template": plan.is_template,
        "template_name": plan.template_name,
        "goals": [goal.value for goal in plan.goals],
        "level": plan.level.value,
        "current_week": plan.current_week,
        "total_weeks": plan.total_weeks,
        "last_completed_session": last_completed,
        "progress": plan.progress.model_dump(mode="json"),
    }


def db_row_to_user(row: Dict[str, Any]) -> User:
    """Convert a profiles row to a User."""
    return User.model_validate(
        {
            "id": row.get("id"),
            "role": row.get("role"),
            "is_approved": bool(row.get("is_approved", False)),
            "assigned_trainer_id": row.get("assigned_trainer_id"),
            "name": row.get("name"),
            "email": row.get("email"),
        }
    )
