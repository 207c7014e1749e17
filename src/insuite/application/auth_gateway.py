"""Auth gateway — sign-up, sign-in and sign-out for the views.

Wraps the identity provider, validates input before any call, and keeps
the session store in step with sign-out.
"""

from __future__ import annotations

import logging

from insuite.application.session_store import SessionStore
from insuite.domain.exceptions import AuthenticationError, RemoteCallError, ValidationError
from insuite.domain.model.identity import Session, SignUpResult
from insuite.domain.repository.identity_provider import IdentityProvider

logger = logging.getLogger(__name__)

CONFIRMATION_PENDING_PHRASE = "confirmation email"


def is_confirmation_pending(message: str) -> bool:
    """True when a sign-up error only means "go check your inbox".

    Some provider setups report a delayed confirmation email as an error;
    the phrase below is the only signal available for that case.
    """
    return CONFIRMATION_PENDING_PHRASE in (message or "")


class AuthGateway:

    def __init__(
        self,
        provider: IdentityProvider,
        session_store: SessionStore,
        email_redirect_to: str,
    ) -> None:
        self._provider = provider
        self._session_store = session_store
        self._email_redirect_to = email_redirect_to

    def sign_up(self, email: str, password: str) -> SignUpResult:
        self._require_credentials(email, password)
        try:
            return self._provider.sign_up(email, password, self._email_redirect_to)
        except AuthenticationError as exc:
            if is_confirmation_pending(str(exc)):
                logger.info("Sign-up for %s awaits email confirmation", email)
                return SignUpResult.PENDING_CONFIRMATION
            raise

    def sign_in(self, email: str, password: str) -> Session:
        self._require_credentials(email, password)
        session = self._provider.sign_in(email, password)
        logger.info("Signed in as %s", session.user.email)
        return session

    def sign_out(self) -> None:
        """Sign out at the provider, then always clear the local session."""
        try:
            self._provider.sign_out()
        except (AuthenticationError, RemoteCallError) as exc:
            logger.warning("Provider sign-out failed, clearing local session anyway: %s", exc)
        self._session_store.clear()

    @staticmethod
    def _require_credentials(email: str, password: str) -> None:
        if not email or not email.strip() or not password:
            raise ValidationError("Email and password are required")
