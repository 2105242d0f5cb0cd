"""
Unit tests for database row <-> domain model converters.
"""

from datetime import datetime, timezone

import pytest

from domain.converters import db_row_to_plan, db_row_to_user, plan_to_db_row
from domain.models import (
    LastCompletedSession,
    PlanFrequency,
    PlanGoal,
    PlanLevel,
    PlanProgress,
    UserRole,
)
from tests.fakes import make_plan


@pytest.fixture
def plan_row() -> dict:
    """A workout_plans row as Supabase returns it."""
    return {
        "id": "7d0c9c1e-0000-4000-8000-000000000001",
        "client_id": "client-1",
        "trainer_id": "trainer-1",
        "name": "Hypertrophy Phase 1",
        "description": "Upper/lower split",
        "notes": None,
        "frequency": "4x",
        "session_ids": ["s1", "s2", "s3", "s4"],
        "start_date": "2026-02-02T00:00:00Z",
        "end_date": None,
        "is_active": True,
        "is_template": False,
        "template_name": None,
        "goals": ["muscle_gain"],
        "level": "intermediate",
        "current_week": 2,
        "total_weeks": 8,
        "last_completed_session": {
            "session_id": "s3",
            "completed_at": "2026-02-11T18:00:00Z",
            "week": 2,
        },
        "progress": {
            "total_sessions_completed": 7,
            "total_sessions_planned": 32,
            "completion_rate": 22,
        },
        "created_at": "2026-01-30T10:00:00+00:00",
        "updated_at": "2026-02-11T18:00:05+00:00",
    }


@pytest.mark.unit
class TestDbRowToPlan:
    def test_full_row(self, plan_row):
        plan = db_row_to_plan(plan_row)

        assert plan.id == plan_row["id"]
        assert plan.frequency == PlanFrequency.FOUR_PER_WEEK
        assert plan.level == PlanLevel.INTERMEDIATE
        assert plan.goals == [PlanGoal.MUSCLE_GAIN]
        assert plan.start_date == datetime(2026, 2, 2, tzinfo=timezone.utc)
        assert plan.progress.total_sessions_planned == 32
        assert plan.last_completed_session.week == 2
        assert plan.last_completed_session.completed_at == datetime(
            2026, 2, 11, 18, 0, tzinfo=timezone.utc
        )
        assert plan.created_at is not None

    def test_sparse_row_uses_defaults(self):
        plan = db_row_to_plan({
            "id": "p1",
            "client_id": "c1",
            "trainer_id": "t1",
            "name": "Sparse",
            "start_date": "2026-02-02T00:00:00",
            "progress": None,
            "goals": None,
            "session_ids": None,
        })
        assert plan.frequency == PlanFrequency.THREE_PER_WEEK
        assert plan.level == PlanLevel.BEGINNER
        assert plan.total_weeks == 4
        assert plan.current_week == 1
        assert plan.progress == PlanProgress()
        assert plan.session_ids == []
        assert plan.last_completed_session is None


@pytest.mark.unit
class TestPlanToDbRow:
    def test_serializes_enums_and_dates(self):
        plan = make_plan(
            frequency="5x",
            goals=["endurance", "performance"],
            level="advanced",
            end_date=datetime(2026, 3, 1, tzinfo=timezone.utc),
        )
        row = plan_to_db_row(plan)

        assert row["frequency"] == "5x"
        assert row["level"] == "advanced"
        assert row["goals"] == ["endurance", "performance"]
        assert row["start_date"] == "2026-01-05T00:00:00+00:00"
        assert row["end_date"] == "2026-03-01T00:00:00+00:00"
        assert row["progress"] == {
            "total_sessions_completed": 0,
            "total_sessions_planned": 0,
            "completion_rate": 0,
        }
        assert row["last_completed_session"] is None

    def test_excludes_identity_and_timestamps(self):
        row = plan_to_db_row(make_plan(id="p1"))
        assert "id" not in row
        assert "created_at" not in row
        assert "updated_at" not in row

    def test_last_completed_session_is_json(self):
        plan = make_plan(
            last_completed_session=LastCompletedSession(
                session_id="s1",
                completed_at=datetime(2026, 1, 6, 7, 30, tzinfo=timezone.utc),
                week=1,
            )
        )
        row = plan_to_db_row(plan)
        assert row["last_completed_session"]["session_id"] == "s1"
        assert isinstance(row["last_completed_session"]["completed_at"], str)

    def test_row_converts_back(self, plan_row):
        plan = db_row_to_plan(plan_row)
        restored = db_row_to_plan({**plan_to_db_row(plan), "id": plan.id})
        assert restored.model_dump(exclude={"created_at", "updated_at"}) == plan.model_dump(
            exclude={"created_at", "updated_at"}
        )


@pytest.mark.unit
class TestDbRowToUser:
    def test_trainer_row(self):
        user = db_row_to_user({"id": "t1", "role": "trainer", "is_approved": True})
        assert user.role == UserRole.TRAINER
        assert user.is_approved_trainer

    def test_client_row(self):
        user = db_row_to_user({
            "id": "c1",
            "role": "client",
            "is_approved": None,
            "assigned_trainer_id": "t1",
            "email": "c1@example.com",
        })
        assert user.is_client
        assert user.is_approved is False
        assert user.assigned_trainer_id == "t1"
