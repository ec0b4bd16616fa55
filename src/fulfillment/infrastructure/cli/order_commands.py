"""CLI commands for the Order aggregate."""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path

import click

from fulfillment.application.cancel_order import CancelOrderHandler
from fulfillment.application.deliver_order import DeliverOrderHandler
from fulfillment.application.dto import OrderDTO
from fulfillment.application.refund_order import RefundOrderHandler
from fulfillment.application.show_order import ShowOrderHandler
from fulfillment.config import Settings
from fulfillment.domain.exceptions import DomainException
from fulfillment.domain.model.order import Order, OrderItem, OrderType
from fulfillment.domain.model.value_objects import Money
from fulfillment.infrastructure import bootstrap


def _load_order(path: Path) -> Order:
    """Build an Order from a JSON file.

    Expected keys: id, customer_id, customer_name, customer_email,
    shipping_address, type (standard|express|international) and
    items, a list of {product_id, product_name, quantity, unit_price}.
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"{path} is not valid JSON: {exc}")

    try:
        order_type = OrderType(raw.get("type", "standard").upper())
    except ValueError:
        raise click.BadParameter(f"Unknown order type '{raw.get('type')}'")

    try:
        items = [
            OrderItem(
                product_id=str(i["product_id"]),
                product_name=i.get("product_name", str(i["product_id"])),
                quantity=int(i["quantity"]),
                unit_price=Money.of(i["unit_price"]),
            )
            for i in raw.get("items", [])
        ]
        return Order(
            id=str(raw["id"]),
            customer_id=raw.get("customer_id", ""),
            customer_name=raw.get("customer_name", ""),
            customer_email=raw.get("customer_email", ""),
            shipping_address=raw.get("shipping_address", ""),
            items=items,
            order_type=order_type,
        )
    except (KeyError, TypeError, ValueError, DomainException) as exc:
        raise click.BadParameter(f"Malformed order file {path}: {exc!r}")


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  ({dto.order_type}, status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Ordered:  {dto.order_date}")
    if dto.shipped_date:
        click.echo(f"Shipped:  {dto.shipped_date}  tracking {dto.tracking_number}")
    if dto.payment:
        click.echo(f"Payment:  {dto.payment}")
    click.echo()

    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Subtotal':<27} {dto.subtotal:>20}")
    click.echo(f"  {'Discount':<27} {'-' + dto.discount:>20}")
    click.echo(f"  {'Tax':<27} {dto.tax:>20}")
    click.echo(f"  {'Shipping':<27} {dto.shipping:>20}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")
    if dto.capabilities:
        click.echo()
        click.echo(f"Allowed actions: {', '.join(dto.capabilities)}")


def _parse_percentage(raw: str | None) -> Decimal | None:
    if raw is None:
        return None
    try:
        return Decimal(raw)
    except InvalidOperation:
        raise click.BadParameter(f"Invalid percentage '{raw}'", param_hint="--percentage")


@click.command("process")
@click.option(
    "--file", "order_file", required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON file describing the order.",
)
@click.option("--discount", default="none", show_default=True,
              type=click.Choice(bootstrap.DISCOUNT_NAMES, case_sensitive=False))
@click.option("--percentage", default=None, help="Percent off for --discount percentage (e.g. 5).")
@click.option("--shipping", default="standard", show_default=True,
              type=click.Choice(["standard", "express", "international"], case_sensitive=False))
@click.option("--payment", default="credit-card", show_default=True,
              help="Payment processor key (credit-card, paypal, bank-transfer, crypto).")
@click.option("--notifier", "notifier_name", default="email", show_default=True,
              type=click.Choice(["email", "sms", "push"], case_sensitive=False))
@click.pass_obj
def order_process(
    settings: Settings,
    order_file: Path,
    discount: str,
    percentage: str | None,
    shipping: str,
    payment: str,
    notifier_name: str,
) -> None:
    """Run an order through the fulfillment pipeline."""
    order = _load_order(order_file)
    percent = _parse_percentage(percentage)

    try:
        handler = bootstrap.fulfill_order_handler(notifier_name, settings)
        succeeded = handler.handle(
            order,
            bootstrap.discount_strategy(discount, percent, settings),
            bootstrap.shipping_provider(shipping),
            bootstrap.payment_processor(payment),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not succeeded:
        raise click.ClickException(
            f"Order {order.id} could not be fulfilled (status={order.status.value}); see log"
        )

    click.echo(f"Order {order.id} fulfilled.")
    _display_order(OrderDTO.from_order(order))


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(settings: Settings, order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=bootstrap.order_repository(settings))

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("deliver")
@click.option("--id", "order_id", required=True, help="Order ID to mark delivered.")
@click.pass_obj
def order_deliver(settings: Settings, order_id: str) -> None:
    """Record delivery of a shipped order."""
    handler = DeliverOrderHandler(order_repo=bootstrap.order_repository(settings))

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} delivered.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, help="Order ID to cancel.")
@click.pass_obj
def order_cancel(settings: Settings, order_id: str) -> None:
    """Cancel an order that has not shipped yet."""
    handler = CancelOrderHandler(order_repo=bootstrap.order_repository(settings))

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} cancelled.")


@click.command("refund")
@click.option("--id", "order_id", required=True, help="Order ID to refund.")
@click.option("--amount", required=True, help="Amount to refund (e.g. 25.00).")
@click.pass_obj
def order_refund(settings: Settings, order_id: str, amount: str) -> None:
    """Refund part or all of an order's payment."""
    handler = RefundOrderHandler(order_repo=bootstrap.order_repository(settings))

    try:
        remaining = handler.handle(order_id, amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Refunded {Money.of(amount)} on order {order_id}; {remaining} still refundable.")
