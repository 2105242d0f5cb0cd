"""Application services: rule checks shared by the plan use cases."""

from application.services.plan_validator import (
    enforce_session_capacity,
    max_sessions_for,
    prepare_for_write,
    validate_plan_relations,
)

__all__ = [
    "enforce_session_capacity",
    "max_sessions_for",
    "prepare_for_write",
    "validate_plan_relations",
]
