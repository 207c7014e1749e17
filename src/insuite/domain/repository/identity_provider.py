"""Abstract identity provider (hosted auth service)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Protocol

from insuite.domain.model.identity import Session, SignUpResult

SessionListener = Callable[[str, "Session | None"], None]


class Subscription(Protocol):

    def unsubscribe(self) -> None:
        ...


class IdentityProvider(ABC):

    @abstractmethod
    def get_session(self) -> Session | None:
        """Return the current session, or None when signed out."""

    @abstractmethod
    def on_change(self, callback: SessionListener) -> Subscription:
        """Call *callback(event, session)* on sign-in, sign-out and refresh."""

    @abstractmethod
    def sign_up(self, email: str, password: str, redirect_to: str) -> SignUpResult:
        """Create an account; confirmation links point at *redirect_to*."""

    @abstractmethod
    def sign_in(self, email: str, password: str) -> Session:
        """Sign in with email and password."""

    @abstractmethod
    def sign_out(self) -> None:
        """End the provider-side session."""
