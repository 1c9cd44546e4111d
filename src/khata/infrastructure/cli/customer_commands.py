"""CLI commands for customers and their khata."""

from __future__ import annotations

import click

from khata.application.add_customer import AddCustomerHandler
from khata.application.dto import CustomerLedgerDTO
from khata.application.record_transaction import RecordTransactionHandler
from khata.application.scan_receipt import ScanReceiptHandler
from khata.application.show_customer_ledger import (
    ListCustomersHandler,
    ShowCustomerLedgerHandler,
)
from khata.domain.exceptions import DomainException
from khata.domain.model.transaction import TransactionType
from khata.infrastructure.bootstrap import ledger_store, receipt_extractor
from khata.infrastructure.cli.views import require_shopkeeper


@click.command("add")
@click.option("--name", required=True, help="Customer name.")
@click.option("--phone", required=True, help="Phone number.")
def customer_add(name: str, phone: str) -> None:
    """Open a khata for a new customer."""
    require_shopkeeper()
    handler = AddCustomerHandler(ledger_store())

    try:
        customer = handler.handle(name=name, phone=phone)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {customer.id} '{customer.name}' added")


@click.command("list")
def customer_list() -> None:
    """List customers with their due balance."""
    customers = ListCustomersHandler(ledger_store()).handle()

    if not customers:
        click.echo("No customers yet.")
        return

    click.echo(f"{'ID':<34} {'Name':<20} {'Phone':<14} {'Due':>10}")
    click.echo("-" * 81)
    for c in customers:
        click.echo(f"{c.id:<34} {c.name:<20} {c.phone:<14} {c.outstanding_balance:>10}")


def _display_ledger(dto: CustomerLedgerDTO) -> None:
    c = dto.customer
    click.echo(f"{c.name}  ({c.phone})")
    click.echo(f"Outstanding Balance (Udhaar): {c.outstanding_balance}")
    click.echo(f"Last Updated: {c.last_updated}")
    click.echo()

    if not dto.transactions:
        click.echo("No transactions yet.")
        return

    click.echo(f"  {'When':<20} {'Type':<9} {'Amount':>10}  Description")
    click.echo(f"  {'-'*62}")
    for tx in dto.transactions:
        sign = "+" if tx.type == "PURCHASE" else "-"
        click.echo(
            f"  {tx.timestamp:<20} {tx.type:<9} {sign + tx.amount:>10}  {tx.description}"
        )


@click.command("show")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
def customer_show(customer_id: str) -> None:
    """Show a customer's khata."""
    handler = ShowCustomerLedgerHandler(ledger_store())

    try:
        dto = handler.handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_ledger(dto)


def _record(customer_id: str, type: TransactionType, amount: str, description: str | None) -> None:
    store = ledger_store()
    handler = RecordTransactionHandler(store)

    try:
        tx = handler.handle(
            customer_id=customer_id,
            type=type,
            amount=amount,
            description=description,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    customer = store.state.find_customer(customer_id)
    click.echo(f"Recorded {tx.type.value} of {tx.amount}: {tx.description}")
    if customer is None:
        click.echo(f"Warning: no customer with ID '{customer_id}'; no balance was updated.", err=True)
    else:
        click.echo(f"{customer.name} now owes {customer.outstanding_balance}")


@click.command("credit")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.option("--amount", required=True, help="Amount given on credit.")
@click.option("--description", default=None, help="What was bought.")
def customer_credit(customer_id: str, amount: str, description: str | None) -> None:
    """Give credit (+): record a purchase on the khata."""
    require_shopkeeper()
    _record(customer_id, TransactionType.PURCHASE, amount, description)


@click.command("payment")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.option("--amount", required=True, help="Amount received.")
@click.option("--description", default=None, help="Optional note.")
def customer_payment(customer_id: str, amount: str, description: str | None) -> None:
    """Got paid (-): record a payment against the khata."""
    require_shopkeeper()
    _record(customer_id, TransactionType.PAYMENT, amount, description)


@click.command("scan")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.option(
    "--image",
    "image_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, readable=True),
    help="Photo of the bill or list (JPEG).",
)
@click.option("--yes", "assume_yes", is_flag=True, default=False, help="Record without asking.")
def customer_scan(customer_id: str, image_path: str, assume_yes: bool) -> None:
    """Scan a bill with AI and record it as a purchase after confirmation."""
    require_shopkeeper()
    with open(image_path, "rb") as fh:
        image_bytes = fh.read()

    click.echo("Scanning...")
    try:
        draft = ScanReceiptHandler(receipt_extractor()).handle(image_bytes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Found {draft.item_count} item(s)")
    click.echo(f"Amount:      {draft.amount}")
    click.echo(f"Description: {draft.description}")

    if not assume_yes and not click.confirm("Record this purchase?", default=True):
        click.echo("Discarded.")
        return

    _record(customer_id, TransactionType.PURCHASE, draft.amount, draft.description)
