"""CLI commands for the signed-in account."""

from __future__ import annotations

import click

from insuite.application.views import AccountView
from insuite.infrastructure.bootstrap import (
    inventory_repository,
    sales_repository,
    session_store,
)
from insuite.infrastructure.cli.gate import login_required


def _view() -> AccountView:
    return AccountView(session_store(), sales_repository(), inventory_repository())


@click.command("show")
@login_required
def account_show() -> None:
    """Show account details."""
    click.echo(f"Email: {_view().email}")


@click.command("reset")
@click.option("--yes", is_flag=True, default=False, help="Skip the confirmation prompt.")
@login_required
def account_reset(yes: bool) -> None:
    """Delete ALL sales and inventory data. This cannot be undone."""
    if not yes:
        click.confirm(
            "Warning: This action will delete all sales and inventory data. Continue?",
            abort=True,
        )

    view = _view()
    if not view.reset():
        raise click.ClickException(view.message)
    click.echo(view.message)
