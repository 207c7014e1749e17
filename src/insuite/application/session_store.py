"""Session store — the process-wide view of who is signed in.

Built once by the composition root and handed to whatever needs it.
State moves UNINITIALIZED -> LOADING on ``start()`` and then oscillates
between AUTHENTICATED and UNAUTHENTICATED, driven only by the initial
lookup and the provider's change events. ``close()`` must be called by
the owner on shutdown.
"""

from __future__ import annotations

import logging
from typing import Callable

from insuite.domain.exceptions import RemoteCallError
from insuite.domain.model.identity import Session, SessionState, User
from insuite.domain.repository.identity_provider import IdentityProvider, Subscription

logger = logging.getLogger(__name__)

StoreListener = Callable[["SessionStore"], None]


class SessionStore:

    def __init__(self, provider: IdentityProvider) -> None:
        self._provider = provider
        self._session: Session | None = None
        self._state = SessionState.UNINITIALIZED
        self._subscription: Subscription | None = None
        self._listeners: list[StoreListener] = []
        self._closed = False

    # --- Read side ------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def user(self) -> User | None:
        return self._session.user if self._session else None

    @property
    def loading(self) -> bool:
        return self._state in (SessionState.UNINITIALIZED, SessionState.LOADING)

    @property
    def is_authenticated(self) -> bool:
        return self._state == SessionState.AUTHENTICATED

    # --- Lifecycle ------------------------------------------------------------

    def start(self) -> None:
        """Subscribe to provider changes, then resolve the current session.

        A provider outage during the lookup is logged and treated as
        "signed out"; it never propagates.
        """
        if self._subscription is not None:
            return
        self._closed = False
        self._state = SessionState.LOADING
        self._subscription = self._provider.on_change(self._on_provider_change)

        try:
            session = self._provider.get_session()
        except RemoteCallError as exc:
            logger.warning("Session lookup failed, treating as signed out: %s", exc)
            session = None
        self._apply(session)

    def close(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None
        self._closed = True

    def clear(self) -> None:
        """Forget the local session without asking the provider."""
        self._apply(None)

    # --- Observers ------------------------------------------------------------

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Register *listener*; returns a callable that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Internal helpers -----------------------------------------------------

    def _on_provider_change(self, event: str, session: Session | None) -> None:
        if self._closed:
            return
        logger.debug("Auth state change: %s", event)
        self._apply(session)

    def _apply(self, session: Session | None) -> None:
        self._session = session
        self._state = (
            SessionState.AUTHENTICATED if session is not None
            else SessionState.UNAUTHENTICATED
        )
        for listener in list(self._listeners):
            listener(self)
