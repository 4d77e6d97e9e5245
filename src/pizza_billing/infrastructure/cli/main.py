import logging

import click

from pizza_billing.infrastructure.cli.billing_commands import charge, transactions

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log at INFO level.")
def cli(verbose: bool) -> None:
    """Pizza Billing — charge a credit card for a pizza order"""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


# Register subcommands
cli.add_command(charge)
cli.add_command(transactions)
