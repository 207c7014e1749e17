"""Domain-level exceptions.

All failures are expressed as subclasses of DomainException so the view
layer (state holders and CLI) can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was rejected locally, before any remote call."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ConfigurationError(DomainException):
    """Required backend settings are missing."""


class RemoteCallError(DomainException):
    """The hosted backend (or the transport to it) reported a failure."""


class PartialSaleError(RemoteCallError):
    """The sale row was persisted but the inventory decrement failed.

    ``sale`` is the stored row, so callers can show or reconcile it.
    """

    def __init__(self, message: str, sale) -> None:
        super().__init__(message)
        self.sale = sale


class AuthenticationError(DomainException):
    """The identity provider rejected a sign-up, sign-in or session."""
