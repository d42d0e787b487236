import logging

import click

from orderflow.domain.exceptions import DomainException
from orderflow.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_list,
    order_show,
    order_update,
)
from orderflow.infrastructure.config import Settings


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log at DEBUG level.")
def cli(verbose: bool) -> None:
    """orderflow: orders priced and reserved against remote catalogs"""
    try:
        level = "DEBUG" if verbose else Settings.from_env().log_level
    except DomainException as exc:
        raise click.ClickException(str(exc))

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_update)
