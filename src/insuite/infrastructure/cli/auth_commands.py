"""CLI commands for registration, login and logout."""

from __future__ import annotations

import click

from insuite.domain.exceptions import DomainException
from insuite.domain.model.identity import SignUpResult
from insuite.infrastructure.bootstrap import auth_gateway
from insuite.infrastructure.cli.gate import current_session_store


@click.command("register")
@click.option("--email", required=True, help="Account email address.")
@click.password_option(help="Account password.")
def register(email: str, password: str) -> None:
    """Create a new account."""
    try:
        result = auth_gateway().sign_up(email, password)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Registration successful.")
    if result is SignUpResult.PENDING_CONFIRMATION:
        click.echo(
            "Please check your email (including spam folder) for a confirmation "
            "link, then run 'insuite login'."
        )


@click.command("login")
@click.option("--email", required=True, help="Account email address.")
@click.option("--password", prompt=True, hide_input=True, help="Account password.")
def login(email: str, password: str) -> None:
    """Sign in with email and password."""
    try:
        session = auth_gateway().sign_in(email, password)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Logged in as {session.user.email}")


@click.command("logout")
def logout() -> None:
    """Sign out and forget the cached session."""
    try:
        gateway = auth_gateway()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    gateway.sign_out()
    click.echo("Logged out.")


@click.command("whoami")
def whoami() -> None:
    """Show the signed-in account."""
    user = current_session_store().user
    if user is None:
        click.echo("Not logged in.")
        return
    click.echo(user.email or user.id)
