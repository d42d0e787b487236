"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from orderflow.application.dto import OrderDetailSpec, OrderDTO, OrderPayload
from orderflow.domain.exceptions import DomainException
from orderflow.infrastructure.bootstrap import order_workflow


def _parse_items(raw: str) -> list[OrderDetailSpec]:
    """Parse '10:2,11:1' into OrderDetailSpec list."""
    specs: list[OrderDetailSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        pid_str, qty_str = pair.rsplit(":", 1)
        try:
            product_id = int(pid_str)
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid product id or quantity in '{pair}'."
            )
        specs.append(OrderDetailSpec(product_id=product_id, quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    client = dto.client.name if dto.client else "?"
    click.echo(f"Client:   #{dto.client_id} {client}")
    if dto.number:
        click.echo(f"Number:   {dto.number}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Amount':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.details:
        name = item.product.name if item.product else f"#{item.product_id}"
        price = item.price or "-"
        click.echo(
            f"  {name:<20} {item.quantity:>5} {price:>10} {item.amount:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total_price:>20}")


@click.command("list")
def order_list() -> None:
    """List every order."""
    try:
        dtos = order_workflow().list_orders()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dtos:
        click.echo("No orders.")
    for dto in dtos:
        client = dto.client.name if dto.client else "?"
        click.echo(
            f"#{dto.id:<5} {dto.status:<10} client #{dto.client_id} {client:<20} {dto.total_price:>12}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    try:
        dto = order_workflow().get_order(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("create")
@click.option("--client", "client_id", required=True, type=int, help="Client ID.")
@click.option("--number", default=None, help="Order number.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
def order_create(client_id: int, number: str | None, items: str) -> None:
    """Create an order (reduces catalog stock)."""
    payload = OrderPayload(client_id=client_id, number=number, details=_parse_items(items))

    try:
        dto = order_workflow().create_order(payload)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created  (status={dto.status})")
    _display_order(dto)


@click.command("update")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option("--client", "client_id", required=True, type=int, help="Client ID.")
@click.option("--number", default=None, help="Order number.")
@click.option("--status", default=None, help="New status (defaults to PENDING).")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
def order_update(
    order_id: int,
    client_id: int,
    number: str | None,
    status: str | None,
    items: str,
) -> None:
    """Replace an order's details (restores then reduces catalog stock)."""
    payload = OrderPayload(
        client_id=client_id,
        number=number,
        status=status,
        details=_parse_items(items),
    )

    try:
        dto = order_workflow().update_order(order_id, payload)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} updated  (status={dto.status})")
    _display_order(dto)


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
def order_delete(order_id: int) -> None:
    """Delete an order (restores catalog stock first)."""
    try:
        order_workflow().delete_order(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} deleted, stock restored.")
