from __future__ import annotations

import logging
from pathlib import Path

import click

from grocery.infrastructure.bootstrap import order_repository
from grocery.infrastructure.cli.order_commands import order_list, order_show


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Grocery order lookup."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.group()
@click.option(
    "--file",
    "orders_file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="GROCERY_ORDERS_FILE",
    default=None,
    help="Orders CSV file (defaults to data/orders.csv).",
)
@click.pass_context
def order(ctx: click.Context, orders_file: Path | None) -> None:
    """Inspect orders."""
    ctx.obj = order_repository(orders_file)


# Register subcommands
order.add_command(order_list)
order.add_command(order_show)
