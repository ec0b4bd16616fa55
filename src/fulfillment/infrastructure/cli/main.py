import click

from fulfillment.config import Settings
from fulfillment.infrastructure.cli.inventory_commands import (
    inventory_release,
    inventory_set,
    inventory_show,
)
from fulfillment.infrastructure.cli.order_commands import (
    order_cancel,
    order_deliver,
    order_process,
    order_refund,
    order_show,
)
from fulfillment.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--log-level", default=None, help="Override FULFILLMENT_LOG_LEVEL.")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Order fulfillment pipeline."""
    settings = Settings.from_env()
    configure_logging(log_level or settings.log_level)
    ctx.obj = settings


@cli.group()
def order() -> None:
    """Process and manage orders."""


@cli.group()
def inventory() -> None:
    """Manage inventory."""


# Register subcommands
order.add_command(order_cancel)
order.add_command(order_deliver)
order.add_command(order_process)
order.add_command(order_refund)
order.add_command(order_show)
inventory.add_command(inventory_release)
inventory.add_command(inventory_set)
inventory.add_command(inventory_show)
