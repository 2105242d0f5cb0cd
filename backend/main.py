"""
Service factory for the workout plan backend.

The factory pattern allows for:
- Easy testing with custom settings or an injected client
- Clear separation of wiring from business logic

Usage:
    from backend.main import create_plan_services
    from backend.settings import Settings

    # Default wiring (uses get_settings())
    services = create_plan_services()
    plan = services.create_plan.execute({...})

    # Test wiring with custom settings and a mock client
    services = create_plan_services(
        settings=Settings(environment="test", _env_file=None),
        client=mock_client,
    )
"""

import logging
from dataclasses import dataclass
from typing import Optional

import sentry_sdk
from supabase import Client

from application.ports import UserRepository, WorkoutPlanRepository
from application.use_cases import (
    CreateWorkoutPlanUseCase,
    GetWorkoutPlanUseCase,
    MarkSessionCompletedUseCase,
    UpdateWorkoutPlanUseCase,
)
from backend.database import get_supabase_client
from backend.settings import Settings, get_settings
from infrastructure import SupabaseUserRepository, SupabaseWorkoutPlanRepository

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass
class PlanServices:
    """Wired repositories and use cases for workout plans."""

    plan_repo: WorkoutPlanRepository
    user_repo: UserRepository
    create_plan: CreateWorkoutPlanUseCase
    update_plan: UpdateWorkoutPlanUseCase
    mark_session_completed: MarkSessionCompletedUseCase
    get_plan: GetWorkoutPlanUseCase


def create_plan_services(
    settings: Optional[Settings] = None,
    client: Optional[Client] = None,
) -> PlanServices:
    """
    Create and wire the workout plan services.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.
        client: Optional Supabase client. If not provided, one is built from settings.

    Returns:
        PlanServices with Supabase-backed repositories.

    Raises:
        RuntimeError: If no client is given and Supabase is not configured.
    """
    if settings is None:
        settings = get_settings()

    configure_logging(settings)
    _init_sentry(settings)

    if client is None:
        client = get_supabase_client(settings)
    if client is None:
        raise RuntimeError("Supabase is not configured (SUPABASE_URL / SUPABASE_*_KEY)")

    plan_repo = SupabaseWorkoutPlanRepository(client, table=settings.workout_plans_table)
    user_repo = SupabaseUserRepository(client, table=settings.profiles_table)

    logger.info(f"Workout plan services ready (environment={settings.environment})")
    return PlanServices(
        plan_repo=plan_repo,
        user_repo=user_repo,
        create_plan=CreateWorkoutPlanUseCase(plan_repo=plan_repo, user_repo=user_repo),
        update_plan=UpdateWorkoutPlanUseCase(plan_repo=plan_repo),
        mark_session_completed=MarkSessionCompletedUseCase(plan_repo=plan_repo),
        get_plan=GetWorkoutPlanUseCase(plan_repo=plan_repo),
    )


def configure_logging(settings: Settings) -> None:
    """Configure root logging once; later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(settings.log_level)


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,
        )
        logger.info("Sentry initialized for workout plan services")
