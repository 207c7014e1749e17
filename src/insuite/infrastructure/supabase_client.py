"""Supabase client construction and error translation.

Everything that talks to the hosted backend goes through ``run()`` so
PostgREST and transport failures surface as ``RemoteCallError``.
"""

from __future__ import annotations

import logging

import httpx
from postgrest.exceptions import APIError
from supabase import Client, create_client

from insuite.domain.exceptions import ConfigurationError, RemoteCallError
from insuite.infrastructure.config import Settings

logger = logging.getLogger(__name__)


def build_client(settings: Settings) -> Client:
    if not settings.supabase_url or not settings.supabase_key:
        raise ConfigurationError(
            "SUPABASE_URL and SUPABASE_KEY must be set to reach the backend"
        )
    return create_client(settings.supabase_url, settings.supabase_key)


def describe_error(exc: Exception) -> str:
    """Best human-readable message for a backend exception."""
    message = getattr(exc, "message", None)
    return str(message) if message else str(exc)


def run(query):
    """Execute a PostgREST query builder and return its response."""
    try:
        return query.execute()
    except (APIError, httpx.HTTPError) as exc:
        logger.debug("Backend call failed", exc_info=True)
        raise RemoteCallError(describe_error(exc)) from exc
