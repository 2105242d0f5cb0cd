"""
WorkoutPlan aggregate root - a trainer-authored plan for a single client.

A plan references a fixed weekly set of sessions (bounded by its frequency),
runs for a number of weeks, and tracks how many planned sessions the client
has completed.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PlanFrequency(str, Enum):
    """Weekly session count target."""

    THREE_PER_WEEK = "3x"
    FOUR_PER_WEEK = "4x"
    FIVE_PER_WEEK = "5x"

    @property
    def sessions_per_week(self) -> int:
        """Maximum number of distinct sessions a plan may reference."""
        return int(self.value.rstrip("x"))


class PlanLevel(str, Enum):
    """Client experience level the plan is written for."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class PlanGoal(str, Enum):
    """Goal tags a plan can be classified under."""

    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    STRENGTH = "strength"
    ENDURANCE = "endurance"
    FLEXIBILITY = "flexibility"
    CONDITIONING = "conditioning"
    REHABILITATION = "rehabilitation"
    MAINTENANCE = "maintenance"
    PERFORMANCE = "performance"
    OTHER = "other"


def completion_percentage(completed: int, planned: int) -> int:
    """
    Percentage of planned sessions completed, rounded half-up.

    Returns 0 when nothing is planned and never more than 100.
    """
    if planned <= 0:
        return 0
    # Integer half-up rounding (12.5 -> 13)
    rate = (200 * completed + planned) // (2 * planned)
    return max(0, min(100, rate))


class LastCompletedSession(BaseModel):
    """Stamp of the most recently completed session."""

    session_id: str = Field(..., min_length=1, description="Completed session reference")
    completed_at: datetime = Field(..., description="When the session was completed")
    week: int = Field(..., ge=1, description="Plan week the session belonged to")


class PlanProgress(BaseModel):
    """Progress counters kept alongside the plan."""

    model_config = ConfigDict(validate_assignment=True)

    total_sessions_completed: int = Field(default=0, ge=0)
    total_sessions_planned: int = Field(default=0, ge=0)
    completion_rate: int = Field(default=0, ge=0, le=100)

    @property
    def calculated_completion_rate(self) -> int:
        """Completion rate derived from the current counters."""
        return completion_percentage(
            self.total_sessions_completed, self.total_sessions_planned
        )


class PlanStats(BaseModel):
    """Read-only projection of a plan's progress and schedule."""

    model_config = ConfigDict(frozen=True)

    total_sessions: int
    completed_sessions: int
    completion_rate: int
    current_week: int
    total_weeks: int
    frequency: PlanFrequency
    is_active: bool


class WorkoutPlan(BaseModel):
    """
    Aggregate root representing a client's workout plan.

    A WorkoutPlan contains:
    - Identity (id, client_id, trainer_id)
    - Description (name, description, notes)
    - Scheduling (frequency, start/end date, current/total weeks)
    - Classification (goals, level, template flags)
    - Relations (ordered session references)
    - Progress (completed/planned counters, last completed session)

    Domain methods never mutate in place; they return updated copies.

    Examples:
        >>> from datetime import datetime
        >>> plan = WorkoutPlan(
        ...     name="Strength Block",
        ...     client_id="client-1",
        ...     trainer_id="trainer-1",
        ...     start_date=datetime(2026, 1, 5),
        ...     session_ids=["s1", "s2", "s3"],
        ... )
        >>> plan.with_planned_sessions().progress.total_sessions_planned
        12
    """

    model_config = ConfigDict(validate_assignment=True)

    # Identity
    id: Optional[str] = Field(
        default=None,
        description="Unique identifier. None for new, unsaved plans.",
    )
    client_id: str = Field(..., min_length=1, description="Client the plan belongs to")
    trainer_id: str = Field(..., min_length=1, description="Trainer who owns the plan")

    # Descriptive
    name: str = Field(..., min_length=1, max_length=100, description="Plan name")
    description: Optional[str] = Field(default=None, max_length=500)
    notes: Optional[str] = Field(default=None, max_length=1000)

    # Scheduling
    frequency: PlanFrequency = Field(default=PlanFrequency.THREE_PER_WEEK)
    start_date: datetime = Field(..., description="First day of the plan")
    end_date: Optional[datetime] = Field(default=None)
    current_week: int = Field(default=1, ge=1)
    total_weeks: int = Field(default=4, ge=1, le=52)

    # Classification
    goals: List[PlanGoal] = Field(default_factory=list)
    level: PlanLevel = Field(default=PlanLevel.BEGINNER)
    is_template: bool = Field(
        default=False,
        description="Whether the plan can be reused as a pattern for other clients",
    )
    template_name: Optional[str] = Field(default=None, max_length=100)

    # Status
    is_active: bool = Field(default=True)

    # Relations
    session_ids: List[str] = Field(
        default_factory=list, description="Ordered workout session references"
    )

    # Progress
    last_completed_session: Optional[LastCompletedSession] = Field(default=None)
    progress: PlanProgress = Field(default_factory=PlanProgress)

    # Document timestamps (managed by the persistence layer)
    created_at: Optional[datetime] = Field(default=None)
    updated_at: Optional[datetime] = Field(default=None)

    @field_validator("name", "description", "template_name", mode="before")
    @classmethod
    def strip_text(cls, v):
        """Trim surrounding whitespace before length checks."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("goals")
    @classmethod
    def dedupe_goals(cls, v: List[PlanGoal]) -> List[PlanGoal]:
        """Goals behave as a set; keep first-seen order."""
        seen = set()
        unique = []
        for goal in v:
            if goal not in seen:
                seen.add(goal)
                unique.append(goal)
        return unique

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def is_new(self) -> bool:
        """Check if this plan has not been saved yet."""
        return self.id is None

    @property
    def max_sessions(self) -> int:
        """Session cap implied by the plan frequency."""
        return self.frequency.sessions_per_week

    @property
    def session_count(self) -> int:
        return len(self.session_ids)

    @property
    def planned_sessions(self) -> int:
        """Total sessions over the whole plan (sessions per week x weeks)."""
        return self.session_count * self.total_weeks

    # -------------------------------------------------------------------------
    # Domain Methods (return new instances for immutability)
    # -------------------------------------------------------------------------

    def with_id(self, plan_id: str) -> "WorkoutPlan":
        """Return a new WorkoutPlan with the given ID set."""
        return self.model_copy(update={"id": plan_id})

    def with_planned_sessions(self) -> "WorkoutPlan":
        """
        Return a new WorkoutPlan with total_sessions_planned recomputed.

        Called on every write so the counter always matches the session list.
        """
        progress = self.progress.model_copy(
            update={"total_sessions_planned": self.planned_sessions}
        )
        return self.model_copy(update={"progress": progress})

    def calculate_completion_rate(self) -> "WorkoutPlan":
        """
        Return a new WorkoutPlan with completion_rate refreshed from the counters.

        Returns:
            New WorkoutPlan; read ``progress.completion_rate`` for the value.
        """
        progress = self.progress.model_copy(
            update={"completion_rate": self.progress.calculated_completion_rate}
        )
        return self.model_copy(update={"progress": progress})

    def mark_session_completed(
        self,
        session_id: str,
        week: int,
        completed_at: Optional[datetime] = None,
    ) -> "WorkoutPlan":
        """
        Return a new WorkoutPlan with one more completed session.

        Increments total_sessions_completed, stamps last_completed_session
        and recomputes the completion rate. Persisting the result is the
        caller's job.

        Args:
            session_id: The session that was completed.
            week: Plan week the session belonged to.
            completed_at: Completion time (defaults to now, UTC).

        Returns:
            New WorkoutPlan with updated progress.
        """
        stamp = LastCompletedSession(
            session_id=session_id,
            completed_at=completed_at or datetime.now(timezone.utc),
            week=week,
        )
        progress = self.progress.model_copy(
            update={
                "total_sessions_completed": self.progress.total_sessions_completed + 1
            }
        )
        updated = self.model_copy(
            update={"progress": progress, "last_completed_session": stamp}
        )
        return updated.calculate_completion_rate()

    def get_stats(self) -> PlanStats:
        """Read-only summary of progress and scheduling."""
        return PlanStats(
            total_sessions=self.progress.total_sessions_planned,
            completed_sessions=self.progress.total_sessions_completed,
            completion_rate=self.progress.completion_rate,
            current_week=self.current_week,
            total_weeks=self.total_weeks,
            frequency=self.frequency,
            is_active=self.is_active,
        )

    def __str__(self) -> str:
        """Human-readable string representation."""
        parts = [f'"{self.name}"', self.frequency.value]
        parts.append(f"week {self.current_week}/{self.total_weeks}")
        parts.append(f"{self.progress.completion_rate}% complete")
        if self.is_template:
            parts.append("[template]")
        if not self.is_active:
            parts.append("[inactive]")
        return f"WorkoutPlan({', '.join(parts)})"
