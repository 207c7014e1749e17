import click

from insuite.infrastructure.bootstrap import settings, shutdown
from insuite.infrastructure.cli.account_commands import account_reset, account_show
from insuite.infrastructure.cli.auth_commands import login, logout, register, whoami
from insuite.infrastructure.cli.dashboard_commands import dashboard
from insuite.infrastructure.cli.inventory_commands import (
    inventory_add,
    inventory_delete,
    inventory_list,
    inventory_update,
)
from insuite.infrastructure.cli.sales_commands import sales_add, sales_list, sales_products
from insuite.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """InSuite — inventory and sales tracking"""
    configure_logging("DEBUG" if verbose else settings().log_level)
    ctx.call_on_close(shutdown)


@cli.group()
def inventory() -> None:
    """Manage inventory."""


@cli.group()
def sales() -> None:
    """Record and review sales."""


@cli.group()
def account() -> None:
    """Account details and data reset."""


# Register subcommands
cli.add_command(register)
cli.add_command(login)
cli.add_command(logout)
cli.add_command(whoami)
cli.add_command(dashboard)
inventory.add_command(inventory_add)
inventory.add_command(inventory_delete)
inventory.add_command(inventory_list)
inventory.add_command(inventory_update)
sales.add_command(sales_add)
sales.add_command(sales_list)
sales.add_command(sales_products)
account.add_command(account_reset)
account.add_command(account_show)
