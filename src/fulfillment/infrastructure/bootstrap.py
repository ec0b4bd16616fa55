"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  Strategies are looked
up by the names the CLI accepts; an unknown name is a ConfigurationError.
Factories read Settings from the environment unless one is passed in;
nothing is cached between calls.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

from fulfillment.application.fulfill_order import FulfillOrderHandler
from fulfillment.config import Settings
from fulfillment.domain.exceptions import ConfigurationError
from fulfillment.domain.service.inventory_service import StockInventoryService
from fulfillment.domain.service.notifier import Notifier
from fulfillment.domain.service.order_handlers import OrderHandlerRegistry
from fulfillment.domain.service.order_validator import OrderValidator
from fulfillment.domain.service.pricing_calculator import PricingCalculator
from fulfillment.domain.strategy.discount import (
    BulkOrderDiscount,
    CustomerAllowlistDiscount,
    DiscountStrategy,
    NoDiscount,
    PercentageDiscount,
)
from fulfillment.domain.strategy.payment import PaymentGateway, PaymentProcessor
from fulfillment.domain.strategy.shipping import (
    ExpressShipping,
    InternationalShipping,
    ShippingProvider,
    StandardShipping,
)
from fulfillment.infrastructure.notification.email_notifier import EmailNotifier
from fulfillment.infrastructure.notification.push_notifier import PushNotifier
from fulfillment.infrastructure.notification.sms_notifier import SmsNotifier
from fulfillment.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)
from fulfillment.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)

DISCOUNT_NAMES = ("none", "percentage", "bulk", "vip")

_SHIPPING: dict[str, Callable[[], ShippingProvider]] = {
    "standard": StandardShipping,
    "express": ExpressShipping,
    "international": InternationalShipping,
}

_NOTIFIERS: dict[str, Callable[[], Notifier]] = {
    "email": EmailNotifier,
    "sms": SmsNotifier,
    "push": PushNotifier,
}


def order_repository(settings: Settings | None = None) -> JsonOrderRepository:
    settings = settings or Settings.from_env()
    return JsonOrderRepository(settings.data_dir / "orders.json")


def inventory_repository(settings: Settings | None = None) -> JsonInventoryRepository:
    settings = settings or Settings.from_env()
    return JsonInventoryRepository(settings.data_dir / "inventory.json")


def discount_strategy(
    name: str,
    percentage: Decimal | None = None,
    settings: Settings | None = None,
) -> DiscountStrategy:
    key = name.lower()
    if key == "none":
        return NoDiscount()
    if key == "percentage":
        if percentage is None:
            raise ConfigurationError("The percentage discount needs a percentage")
        return PercentageDiscount(percentage)
    if key == "bulk":
        return BulkOrderDiscount()
    if key == "vip":
        return CustomerAllowlistDiscount((settings or Settings.from_env()).vip_customers)
    raise ConfigurationError(
        f"Unknown discount strategy '{name}' (available: {', '.join(DISCOUNT_NAMES)})"
    )


def shipping_provider(name: str) -> ShippingProvider:
    return _lookup("shipping provider", _SHIPPING, name)()


def notifier(name: str) -> Notifier:
    return _lookup("notifier", _NOTIFIERS, name)()


def payment_processor(key: str) -> PaymentProcessor:
    return PaymentGateway.default().get(key)


def fulfill_order_handler(
    notifier_name: str = "email", settings: Settings | None = None
) -> FulfillOrderHandler:
    settings = settings or Settings.from_env()
    return FulfillOrderHandler(
        validator=OrderValidator(),
        calculator=PricingCalculator(settings.tax_rate),
        order_repo=order_repository(settings),
        inventory=StockInventoryService(inventory_repository(settings)),
        notifier=notifier(notifier_name),
        order_handlers=OrderHandlerRegistry.default(),
    )


def _lookup(kind: str, registry: dict, name: str):
    try:
        return registry[name.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown {kind} '{name}' (available: {', '.join(sorted(registry))})"
        ) from None
