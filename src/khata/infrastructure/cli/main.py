import click

from khata.application.view_mode import ViewMode
from khata.infrastructure.cli.customer_commands import (
    customer_add,
    customer_credit,
    customer_list,
    customer_payment,
    customer_scan,
    customer_show,
)
from khata.infrastructure.cli.dashboard_commands import dashboard
from khata.infrastructure.cli.product_commands import product_add, product_list


@click.group()
@click.option(
    "--view",
    type=click.Choice([m.value for m in ViewMode]),
    default=ViewMode.SHOPKEEPER.value,
    show_default=True,
    help="Presentation mode. 'customer' only shows bills.",
)
@click.pass_context
def cli(ctx: click.Context, view: str) -> None:
    """Kirana Khata: shop catalog and customer credit ledger"""
    ctx.obj = ViewMode(view)


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def customer() -> None:
    """Manage customers and their khata."""


# Register subcommands
cli.add_command(dashboard)
product.add_command(product_add)
product.add_command(product_list)
customer.add_command(customer_add)
customer.add_command(customer_credit)
customer.add_command(customer_list)
customer.add_command(customer_payment)
customer.add_command(customer_scan)
customer.add_command(customer_show)
