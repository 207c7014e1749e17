"""Supabase Auth implementation of IdentityProvider."""

from __future__ import annotations

import logging

import httpx
from supabase import AuthError

from insuite.domain.exceptions import AuthenticationError, RemoteCallError
from insuite.domain.model.identity import Session, SignUpResult, User
from insuite.domain.repository.identity_provider import (
    IdentityProvider,
    SessionListener,
    Subscription,
)
from insuite.infrastructure.session_cache import SessionCache
from insuite.infrastructure.supabase_client import describe_error

logger = logging.getLogger(__name__)


class SupabaseIdentityProvider(IdentityProvider):
    """Wraps ``client.auth``.

    When a ``SessionCache`` is given, the token pair is written on every
    sign-in and refresh and removed on sign-out, and ``restore()`` puts a
    cached pair back into the auth client.
    """

    def __init__(self, auth, cache: SessionCache | None = None) -> None:
        self._auth = auth
        self._cache = cache
        self._cache_subscription = None
        if cache is not None:
            self._cache_subscription = auth.on_auth_state_change(self._persist)

    def restore(self) -> None:
        if self._cache is None:
            return
        tokens = self._cache.load()
        if tokens is None:
            return
        try:
            self._auth.set_session(*tokens)
        except (AuthError, httpx.HTTPError) as exc:
            logger.warning("Discarding cached session: %s", describe_error(exc))
            self._cache.clear()

    # --- IdentityProvider interface -------------------------------------------

    def get_session(self) -> Session | None:
        try:
            session = self._auth.get_session()
        except (AuthError, httpx.HTTPError) as exc:
            raise RemoteCallError(describe_error(exc)) from exc
        return self._to_domain(session)

    def on_change(self, callback: SessionListener) -> Subscription:
        def forward(event, session) -> None:
            callback(str(getattr(event, "value", event)), self._to_domain(session))

        return self._auth.on_auth_state_change(forward)

    def sign_up(self, email: str, password: str, redirect_to: str) -> SignUpResult:
        try:
            response = self._auth.sign_up({
                "email": email,
                "password": password,
                "options": {"email_redirect_to": redirect_to},
            })
        except AuthError as exc:
            raise AuthenticationError(describe_error(exc)) from exc
        except httpx.HTTPError as exc:
            raise RemoteCallError(describe_error(exc)) from exc

        # No session means the project requires email confirmation first.
        if response.session is None:
            return SignUpResult.PENDING_CONFIRMATION
        return SignUpResult.COMPLETE

    def sign_in(self, email: str, password: str) -> Session:
        try:
            response = self._auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except AuthError as exc:
            raise AuthenticationError(describe_error(exc)) from exc
        except httpx.HTTPError as exc:
            raise RemoteCallError(describe_error(exc)) from exc

        session = self._to_domain(response.session)
        if session is None:
            raise AuthenticationError("Sign-in did not return a session")
        return session

    def sign_out(self) -> None:
        try:
            self._auth.sign_out()
        except AuthError as exc:
            raise AuthenticationError(describe_error(exc)) from exc
        except httpx.HTTPError as exc:
            raise RemoteCallError(describe_error(exc)) from exc
        finally:
            if self._cache is not None:
                self._cache.clear()

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(session) -> Session | None:
        if session is None or session.user is None:
            return None
        return Session(
            user=User(id=str(session.user.id), email=session.user.email),
            access_token=session.access_token,
            refresh_token=session.refresh_token,
        )

    def _persist(self, event, session) -> None:
        if session is not None and session.refresh_token:
            self._cache.save(session.access_token, session.refresh_token)
        elif str(getattr(event, "value", event)) == "SIGNED_OUT":
            self._cache.clear()
