"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. One Supabase client
and one session store exist per process; ``shutdown()`` releases the
store's provider subscription.
"""

from __future__ import annotations

from functools import lru_cache

from supabase import Client

from insuite.application.auth_gateway import AuthGateway
from insuite.application.session_store import SessionStore
from insuite.infrastructure.config import Settings
from insuite.infrastructure.identity.supabase_identity_provider import (
    SupabaseIdentityProvider,
)
from insuite.infrastructure.persistence.supabase_inventory_repository import (
    SupabaseInventoryRepository,
)
from insuite.infrastructure.persistence.supabase_sales_repository import (
    SupabaseSalesRepository,
)
from insuite.infrastructure.session_cache import SessionCache
from insuite.infrastructure.supabase_client import build_client

_session_store: SessionStore | None = None


@lru_cache(maxsize=1)
def settings() -> Settings:
    return Settings.from_env()


@lru_cache(maxsize=1)
def client() -> Client:
    return build_client(settings())


def inventory_repository() -> SupabaseInventoryRepository:
    return SupabaseInventoryRepository(client())


def sales_repository() -> SupabaseSalesRepository:
    return SupabaseSalesRepository(client())


@lru_cache(maxsize=1)
def identity_provider() -> SupabaseIdentityProvider:
    provider = SupabaseIdentityProvider(
        client().auth, cache=SessionCache(settings().session_file)
    )
    provider.restore()
    return provider


def session_store() -> SessionStore:
    global _session_store
    if _session_store is None:
        _session_store = SessionStore(identity_provider())
        _session_store.start()
    return _session_store


def auth_gateway() -> AuthGateway:
    return AuthGateway(
        identity_provider(), session_store(), settings().email_redirect_to
    )


def shutdown() -> None:
    global _session_store
    if _session_store is not None:
        _session_store.close()
        _session_store = None
