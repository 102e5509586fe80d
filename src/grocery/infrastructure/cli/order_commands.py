"""CLI commands for the Order entity."""

from __future__ import annotations

import click

from grocery.application.dto import OrderDTO
from grocery.application.list_orders import ListOrdersHandler
from grocery.application.show_order import ShowOrderHandler
from grocery.domain.exceptions import DomainException
from grocery.domain.repository.order_repository import OrderRepository


@click.command("list")
@click.pass_obj
def order_list(order_repo: OrderRepository) -> None:
    """List every order in the orders file."""
    handler = ListOrdersHandler(order_repo=order_repo)

    try:
        orders = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Products':>8} {'Total':>12}")
    click.echo("-" * 28)
    for dto in orders:
        click.echo(f"{dto.id:<6} {len(dto.products):>8} {dto.total:>12}")


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}")
    click.echo()
    click.echo(f"  {'Product':<30} {'Price':>10}")
    click.echo(f"  {'-'*41}")
    for line in dto.products:
        click.echo(f"  {line.name:<30} {line.price:>10}")
    click.echo(f"  {'-'*41}")
    click.echo(f"  {'Subtotal':<30} {dto.subtotal:>10}")
    click.echo(f"  {'Tax (7.5%)':<30} {dto.tax:>10}")
    click.echo(f"  {'Total':<30} {dto.total:>10}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(order_repo: OrderRepository, order_id: int) -> None:
    """Show the products and total of one order."""
    handler = ShowOrderHandler(order_repo=order_repo)

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
