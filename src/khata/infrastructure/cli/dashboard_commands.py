"""CLI command for the store overview."""

from __future__ import annotations

import click

from khata.application.show_dashboard import ShowDashboardHandler
from khata.infrastructure.bootstrap import ledger_store
from khata.infrastructure.cli.views import require_section


@click.command("dashboard")
def dashboard() -> None:
    """Show credit totals, recent activity and top debtors."""
    require_section("dashboard")
    dto = ShowDashboardHandler(ledger_store()).handle()

    click.echo(f"Total Credit (Udhaar): {dto.total_credit}")
    click.echo(f"Active Customers:      {dto.customer_count}")
    click.echo(f"Products in Shop:      {dto.product_count}")
    click.echo()

    click.echo("Recent Transactions")
    click.echo("-" * 60)
    if not dto.recent_transactions:
        click.echo("No transactions yet.")
    for tx in dto.recent_transactions:
        direction = "OUT" if tx.type == "PURCHASE" else "IN"
        click.echo(
            f"{direction:<4} {tx.customer_name:<20} {tx.amount:>10}  {tx.description}"
        )
    click.echo()

    click.echo("Top Debtors")
    click.echo("-" * 60)
    if not dto.top_debtors:
        click.echo("No pending credit.")
    for c in dto.top_debtors:
        click.echo(f"{c.name:<20} {c.phone:<14} {c.outstanding_balance:>10}")
