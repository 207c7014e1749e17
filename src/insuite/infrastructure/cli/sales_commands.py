"""CLI commands for sales."""

from __future__ import annotations

import click

from insuite.application.dto import to_sale_line
from insuite.application.views import SalesView
from insuite.infrastructure.bootstrap import (
    inventory_repository,
    sales_repository,
    settings,
)
from insuite.infrastructure.cli.gate import login_required


def _loaded_view() -> SalesView:
    view = SalesView(
        sales_repository(),
        inventory_repository(),
        compensate=settings().compensate_failed_sales,
    )
    if not view.refresh():
        raise click.ClickException(view.error)
    return view


@click.command("list")
@login_required
def sales_list() -> None:
    """Show every sale, most recent first."""
    view = _loaded_view()
    if not view.sales:
        click.echo("No sales recorded.")
        return

    names = view.product_names()
    click.echo(f"{'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}  {'Date':<10}")
    click.echo("-" * 64)
    for line in (to_sale_line(sale, names) for sale in view.sales):
        click.echo(
            f"{line.product_name:<24} {line.quantity:>5} {line.price:>10} "
            f"{line.total:>10}  {line.sale_date:<10}"
        )


@click.command("products")
@login_required
def sales_products() -> None:
    """List products available for sale."""
    view = _loaded_view()
    for item in sorted(view.inventory, key=lambda i: i.product_name):
        click.echo(f"{item.id:<6} {item.product_name} - {item.price} (Available: {item.quantity})")


@click.command("add")
@click.option("--product-id", required=True, type=int, help="Inventory item ID.")
@click.option("--quantity", required=True, type=int, help="Units sold.")
@login_required
def sales_add(product_id: int, quantity: int) -> None:
    """Record a sale and decrement stock."""
    view = _loaded_view()
    if not view.record(product_id, quantity):
        raise click.ClickException(view.error)

    sale = view.sales[0]
    click.echo(f"Sale #{sale.id} recorded: {sale.quantity} x {sale.price} = {sale.total}")
