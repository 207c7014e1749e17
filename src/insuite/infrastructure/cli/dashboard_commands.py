"""CLI command for the dashboard."""

from __future__ import annotations

import click

from insuite.application.dto import to_dashboard
from insuite.application.views import DashboardView
from insuite.infrastructure.bootstrap import inventory_repository, sales_repository
from insuite.infrastructure.cli.gate import login_required


@click.command("dashboard")
@login_required
def dashboard() -> None:
    """Show total sales, total cost, items sold and profit."""
    view = DashboardView(sales_repository(), inventory_repository())
    if not view.refresh():
        raise click.ClickException(view.error)

    dto = to_dashboard(view.summary)
    click.echo(f"{'Total Sales':<12} {dto.total_sales:>14}")
    click.echo(f"{'Total Cost':<12} {dto.total_cost:>14}")
    click.echo(f"{'Items Sold':<12} {dto.items_sold:>14}")
    click.echo(f"{'Profit':<12} {dto.profit:>14}")
