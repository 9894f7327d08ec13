"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO
from storefront.domain.exceptions import DomainException
from storefront.domain.model.cart import Cart
from storefront.domain.model.identity import new_client_id
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.role import Role
from storefront.domain.service.action_policy import ACTION_LABELS
from storefront.infrastructure.cli.auth import role_options

STATUS_CHOICE = click.Choice([s.value for s in OrderStatus], case_sensitive=False)

STATUS_TEXT = {
    OrderStatus.PENDING.value: "Awaiting picking",
    OrderStatus.PICKING_DONE.value: "Picked, awaiting payment",
    OrderStatus.COMPLETED.value: "Completed",
}


def _fill_cart(items: tuple[str, ...], drops: tuple[str, ...]) -> Cart:
    """Replay '--item p1 --item p2:3 --drop p1' as cart button presses."""
    cart = Cart()
    for raw in items:
        product_id, _, qty_str = raw.partition(":")
        try:
            qty = int(qty_str) if qty_str else 1
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        if qty <= 0:
            raise click.BadParameter(f"Quantity for '{product_id}' must be positive.")
        for _ in range(qty):
            cart.add(product_id.strip())
    for product_id in drops:
        cart.remove(product_id.strip())
    return cart


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.short_id}  [{dto.id}]  {STATUS_TEXT[dto.status]}")
    click.echo(f"Client:  {dto.client_id}")
    click.echo(f"Created: {dto.created_at}   Updated: {dto.updated_at}")
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.name:<20} {item.quantity:>5} {item.price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {f'Order Total ({dto.item_count} items)':<27} {dto.total:>20}")
    for action in dto.actions:
        click.echo(f"  -> {ACTION_LABELS[OrderStatus(action)]}: "
                   f"storefront order advance --id {dto.id} --to {action}")


@click.command("submit")
@click.option("--client", "client_id", default=None,
              help="Session client identifier (a new one is issued if omitted).")
@click.option("--item", "items", multiple=True, required=True,
              help="Add a product as 'ID' or 'ID:QTY'. Repeatable.")
@click.option("--drop", "drops", multiple=True,
              help="Remove one unit of a product from the cart. Repeatable.")
@click.pass_obj
def order_submit(store, client_id: str | None, items: tuple[str, ...],
                 drops: tuple[str, ...]) -> None:
    """Submit a cart as a new order."""
    cart = _fill_cart(items, drops)
    client_id = client_id or new_client_id()

    try:
        dto = store.submit_order().handle(cart, client_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
    click.echo()
    click.echo("Order placed! Please proceed to the counter.")


@click.command("list")
@role_options()
@click.option("--client", "client_id", default=None,
              help="Your client identifier (customer role).")
@click.pass_obj
def order_list(store, role: Role, client_id: str | None) -> None:
    """List your open orders (customer) or the task board (staff)."""
    try:
        dtos = store.list_orders().handle(role, client_id=client_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dtos:
        click.echo("No orders to handle.")
        return

    for dto in dtos:
        _display_order(dto)
        click.echo()


@click.command("advance")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--to", "target", type=STATUS_CHOICE, default=None,
              help="Target status (defaults to the only action on offer).")
@role_options(default=Role.PICKER.value)
@click.pass_obj
def order_advance(store, order_id: str, target: str | None, role: Role) -> None:
    """Move an order one step along its lifecycle."""
    next_status = OrderStatus(target.upper()) if target else None

    try:
        order = store.action_dispatcher().dispatch(order_id, role, next_status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if order is None:
        raise click.ClickException(f"Order {order_id} no longer exists.")
    click.echo(f"Order #{order.id[-4:]} is now {STATUS_TEXT[order.status.value]}.")


@click.command("delete")
@click.option("--id", "order_id", required=True, help="Order ID.")
@role_options(default=Role.CASHIER.value)
@click.confirmation_option(prompt="Delete this order?")
@click.pass_obj
def order_delete(store, order_id: str, role: Role) -> None:
    """Delete an order (cashier only)."""
    try:
        store.delete_order().handle(order_id, role)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} deleted.")
