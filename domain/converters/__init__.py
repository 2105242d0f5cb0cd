"""
Domain converters between persistence rows and domain models.

- db_row_to_plan: Database row (from Supabase) -> WorkoutPlan
- plan_to_db_row: WorkoutPlan -> Database row (for persistence)
- db_row_to_user: Profile row -> User

All converters are pure functions with no side effects.

Examples:
    >>> from domain.converters import db_row_to_plan, plan_to_db_row
    >>> row = plan_to_db_row(plan)
    >>> plan = db_row_to_plan({**row, "id": "plan-1"})
"""

from domain.converters.db_converters import (
    db_row_to_plan,
    db_row_to_user,
    plan_to_db_row,
)

__all__ = [
    "db_row_to_plan",
    "plan_to_db_row",
    "db_row_to_user",
]
