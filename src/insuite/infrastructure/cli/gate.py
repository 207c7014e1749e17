"""Authentication gate for commands that need a signed-in user."""

from __future__ import annotations

import functools

import click

from insuite.application.session_store import SessionStore
from insuite.domain.exceptions import DomainException
from insuite.infrastructure.bootstrap import session_store


def current_session_store() -> SessionStore:
    """The process session store, with setup failures shown as CLI errors."""
    try:
        return session_store()
    except DomainException as exc:
        raise click.ClickException(str(exc))


def login_required(command):
    """Refuse to run *command* unless the session store is authenticated."""

    @functools.wraps(command)
    def wrapper(*args, **kwargs):
        if not current_session_store().is_authenticated:
            raise click.ClickException("Please log in first.")
        return command(*args, **kwargs)

    return wrapper
