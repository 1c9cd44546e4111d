"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from khata.application.add_product import AddProductHandler
from khata.application.search_products import SearchProductsHandler
from khata.domain.exceptions import DomainException
from khata.infrastructure.bootstrap import ledger_store
from khata.infrastructure.cli.views import require_section, require_shopkeeper


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 120 or 24.50).")
@click.option("--category", default="General", show_default=True, help="Free-form category, e.g. Grains.")
def product_add(name: str, price: str, category: str) -> None:
    """Add a new product to the catalog."""
    require_section("product")
    require_shopkeeper()
    handler = AddProductHandler(ledger_store())

    try:
        product = handler.handle(name=name, price=price, category=category)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.option("--search", default="", help="Filter by name or category.")
def product_list(search: str) -> None:
    """List products in the catalog."""
    require_section("product")
    products = SearchProductsHandler(ledger_store()).handle(search)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<34} {'Name':<24} {'Category':<14} {'Price':>10}")
    click.echo("-" * 85)
    for p in products:
        click.echo(f"{p.id:<34} {p.name:<24} {p.category:<14} {str(p.price):>10}")
