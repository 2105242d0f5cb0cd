"""
Supabase client factory.
"""
import logging
from typing import Optional

from supabase import Client, create_client

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def get_supabase_client(settings: Optional[Settings] = None) -> Optional[Client]:
    """
    Get a Supabase client instance.

    Returns None (with a warning) when credentials are not configured.
    """
    settings = settings or get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        logger.warning("Supabase credentials not configured. Workout plan storage will be disabled.")
        return None

    if not settings.supabase_service_role_key:
        logger.warning("Using SUPABASE_ANON_KEY; row-level security may block plan writes")

    return create_client(settings.supabase_url, settings.supabase_key)
