"""CLI commands for the charge-order use case."""

from __future__ import annotations

import click

from pizza_billing.application.billing_service import BillingService
from pizza_billing.domain.exceptions import BillingException
from pizza_billing.domain.model.receipt import Receipt
from pizza_billing.domain.model.value_objects import CreditCard, PizzaOrder
from pizza_billing.infrastructure import bootstrap
from pizza_billing.infrastructure.container import build_injector


def _billing_service(wiring: str, seed: int | None) -> BillingService:
    if wiring == "container":
        return build_injector(seed=seed).get(BillingService)
    return bootstrap.billing_service(seed)


def _display_receipt(receipt: Receipt) -> None:
    click.echo(f"Status:  {receipt.status.value}")
    click.echo(f"Message: {receipt.message}")
    if receipt.amount is not None:
        click.echo(f"Amount:  {receipt.amount}")


@click.command("charge")
@click.option("--amount", required=True, type=int, help="Amount in cents.")
@click.option("--card", required=True, help="Credit card number.")
@click.option(
    "--wiring",
    type=click.Choice(["manual", "container"]),
    default="manual",
    show_default=True,
    help="How the billing service is assembled.",
)
@click.option("--seed", type=int, default=None, help="Seed for the demo processor.")
def charge(amount: int, card: str, wiring: str, seed: int | None) -> None:
    """Charge a credit card for a pizza order."""
    try:
        order = PizzaOrder(amount)
        credit_card = CreditCard(card)
        service = _billing_service(wiring, seed)
    except BillingException as exc:
        raise click.ClickException(str(exc))

    _display_receipt(service.charge_order(order, credit_card))


@click.command("transactions")
def transactions() -> None:
    """List recorded charge attempts."""
    records = bootstrap.transaction_log().list_records()

    if not records:
        click.echo("No transactions recorded.")
        return

    click.echo(f"{'Recorded at':<34} {'Kind':<20} {'Detail'}")
    click.echo("-" * 72)
    for record in records:
        if record["kind"] == "charge":
            detail = "approved" if record["success"] else f"declined: {record['decline_message']}"
        else:
            detail = record["error"]
        click.echo(f"{record['recorded_at']:<34} {record['kind']:<20} {detail}")
