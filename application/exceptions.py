"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
All of them are raised synchronously during a write (or lookup) and are
surfaced to the caller unchanged; nothing here is retried.
"""

from typing import List, Optional


class WorkoutPlanError(Exception):
    """Base class for workout plan errors."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class PlanValidationError(WorkoutPlanError):
    """A field is missing, out of bounds, or outside its allowed values."""

    @classmethod
    def from_pydantic(cls, exc) -> "PlanValidationError":
        """Build from a pydantic.ValidationError, one message per field."""
        errors = []
        for err in exc.errors():
            location = ".".join(str(part) for part in err.get("loc", ()))
            errors.append(f"{location}: {err.get('msg')}" if location else err.get("msg"))
        return cls("Workout plan validation failed", errors)


class PlanReferenceError(WorkoutPlanError):
    """The trainer/client pair is not a valid relation for a new plan."""

    pass


class PlanCapacityError(WorkoutPlanError):
    """The plan references more sessions than its frequency allows."""

    pass


class PlanNotFoundError(WorkoutPlanError):
    """No plan exists with the requested ID."""

    pass


class PlanPersistenceError(WorkoutPlanError):
    """The storage backend failed to read or write a plan."""

    pass
