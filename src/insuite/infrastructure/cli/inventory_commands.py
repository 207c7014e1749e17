"""CLI commands for inventory management."""

from __future__ import annotations

import click

from insuite.application.dto import to_inventory_line
from insuite.application.views import InventoryView
from insuite.infrastructure.bootstrap import inventory_repository
from insuite.infrastructure.cli.gate import login_required


def _loaded_view() -> InventoryView:
    view = InventoryView(inventory_repository())
    if not view.refresh():
        raise click.ClickException(view.error)
    return view


def _print_table(view: InventoryView) -> None:
    if not view.items:
        click.echo("No inventory records found.")
        return

    click.echo(
        f"{'ID':<6} {'Product':<24} {'Qty':>6} {'Price':>10} {'Cost':>10} {'Supplier':>9}"
    )
    click.echo("-" * 70)
    for line in map(to_inventory_line, view.items):
        click.echo(
            f"{line.id:<6} {line.product_name:<24} {line.quantity:>6} "
            f"{line.price:>10} {line.cost:>10} {line.supplier_id:>9}"
        )


@click.command("list")
@login_required
def inventory_list() -> None:
    """Show every inventory item."""
    _print_table(_loaded_view())


@click.command("add")
@click.option("--name", "product_name", required=True, help="Product name.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--price", required=True, help="Unit price (e.g. 5.00).")
@click.option("--cost", required=True, help="Unit cost (e.g. 2.00).")
@click.option("--supplier", "supplier_id", type=int, default=None, help="Supplier ID (default 1).")
@login_required
def inventory_add(product_name: str, quantity: int, price: str, cost: str, supplier_id: int | None) -> None:
    """Add a new inventory item."""
    view = InventoryView(inventory_repository())
    if not view.add(product_name, quantity, price, cost, supplier_id):
        raise click.ClickException(view.error)

    item = view.items[-1]
    click.echo(f"Item #{item.id} '{item.product_name}' added ({item.quantity} @ {item.price})")


@click.command("update")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.option("--name", "product_name", default=None, help="New product name.")
@click.option("--quantity", type=int, default=None, help="New stock level.")
@click.option("--price", default=None, help="New unit price.")
@click.option("--cost", default=None, help="New unit cost.")
@click.option("--supplier", "supplier_id", type=int, default=None, help="New supplier ID.")
@login_required
def inventory_update(item_id: int, **fields) -> None:
    """Edit an inventory item (unspecified fields keep their values)."""
    changes = {name: value for name, value in fields.items() if value is not None}
    if not changes:
        raise click.UsageError("Nothing to update.")

    view = _loaded_view()
    if not view.edit(item_id, **changes):
        raise click.ClickException(view.error)

    click.echo(f"Item #{item_id} updated.")
    _print_table(view)


@click.command("delete")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@login_required
def inventory_delete(item_id: int) -> None:
    """Delete an inventory item."""
    view = InventoryView(inventory_repository())
    if not view.delete(item_id):
        raise click.ClickException(view.error)

    click.echo(f"Item #{item_id} deleted.")
