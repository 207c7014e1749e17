"""Identity types handed out by the identity provider."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class User:
    id: str
    email: str | None


@dataclass(frozen=True)
class Session:
    """An authenticated session. Tokens are opaque to the application."""

    user: User
    access_token: str
    refresh_token: str | None = None


class SessionState(Enum):
    UNINITIALIZED = "UNINITIALIZED"
    LOADING = "LOADING"
    AUTHENTICATED = "AUTHENTICATED"
    UNAUTHENTICATED = "UNAUTHENTICATED"


class SignUpResult(Enum):
    """Outcome of a sign-up that did not fail.

    PENDING_CONFIRMATION means the account exists but the user has to
    follow the confirmation email before a session is issued.
    """

    COMPLETE = "COMPLETE"
    PENDING_CONFIRMATION = "PENDING_CONFIRMATION"
