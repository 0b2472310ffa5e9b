"""Supabase client factories."""

from __future__ import annotations

import logging
from functools import lru_cache

from supabase import Client, ClientOptions, create_client

from src.config import settings

logger = logging.getLogger(__name__)


def get_supabase_client() -> Client:
    """Create and return a Supabase client from settings."""
    return create_client(settings.supabase_url, settings.supabase_key)


@lru_cache(maxsize=1)
def get_service_role_client() -> Client | None:
    """Return a privileged client that bypasses row-level security.

    Returns None (and logs a warning once) when the Supabase URL or the
    service-role key is not configured.
    """
    if not settings.supabase_url or not settings.supabase_service_role_key:
        missing = "SUPABASE_URL" if not settings.supabase_url else "SUPABASE_SERVICE_ROLE_KEY"
        logger.warning("%s is not configured; service-role client unavailable", missing)
        return None

    return create_client(
        settings.supabase_url,
        settings.supabase_service_role_key,
        options=ClientOptions(persist_session=False, auto_refresh_token=False),
    )
