"""CLI commands for inventory management."""

from __future__ import annotations

import click

from fulfillment.application.release_stock import ReleaseStockHandler
from fulfillment.application.set_inventory import SetInventoryHandler
from fulfillment.application.show_inventory import ShowInventoryHandler
from fulfillment.config import Settings
from fulfillment.domain.exceptions import DomainException
from fulfillment.infrastructure.bootstrap import inventory_repository


@click.command("set")
@click.option("--product-id", required=True, help="Product ID.")
@click.option("--name", "product_name", default="", help="Product name (required for new products).")
@click.option("--quantity", required=True, type=int, help="Total quantity in stock.")
@click.pass_obj
def inventory_set(
    settings: Settings, product_id: str, product_name: str, quantity: int
) -> None:
    """Set inventory level for a product."""
    handler = SetInventoryHandler(inventory_repo=inventory_repository(settings))

    try:
        handler.handle(product_id=product_id, product_name=product_name, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Inventory for '{product_id}' set to {quantity}")


@click.command("release")
@click.option("--product-id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Reserved units to release.")
@click.pass_obj
def inventory_release(settings: Settings, product_id: str, quantity: int) -> None:
    """Release reserved stock left behind by a failed fulfillment."""
    handler = ReleaseStockHandler(inventory_repo=inventory_repository(settings))

    try:
        handler.handle(product_id=product_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Released {quantity} reserved units of '{product_id}'")


@click.command("show")
@click.pass_obj
def inventory_show(settings: Settings) -> None:
    """Show current inventory levels."""
    handler = ShowInventoryHandler(inventory_repo=inventory_repository(settings))
    lines = handler.handle()

    if not lines:
        click.echo("No inventory records found.")
        return

    click.echo(f"{'ID':<10} {'Product':<20} {'Total':>8} {'Reserved':>10} {'Available':>10}")
    click.echo("-" * 62)
    for line in lines:
        click.echo(
            f"{line.product_id:<10} {line.product_name:<20} {line.total:>8} "
            f"{line.reserved:>10} {line.available:>10}"
        )
