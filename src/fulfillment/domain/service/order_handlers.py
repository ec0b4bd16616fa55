"""Domain service: type-specific shipment preparation.

Every order type has exactly one handler.  Handlers are interchangeable:
each one performs its own preparation and leaves the order in
READY_TO_SHIP, nothing more.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterable

from fulfillment.domain.exceptions import ConfigurationError
from fulfillment.domain.model.order import Order, OrderType

logger = logging.getLogger(__name__)


class OrderHandler(ABC):

    @property
    @abstractmethod
    def supported_type(self) -> OrderType:
        """The order type this handler prepares."""

    def prepare_for_shipment(self, order: Order) -> None:
        """Run the preparation steps, then transition to READY_TO_SHIP."""
        for step in self.preparation_steps(order):
            logger.info("[%s] %s", self.supported_type.value, step)
        order.mark_ready_to_ship()

    @abstractmethod
    def preparation_steps(self, order: Order) -> list[str]:
        """Human-readable description of each preparation step."""


class StandardOrderHandler(OrderHandler):

    @property
    def supported_type(self) -> OrderType:
        return OrderType.STANDARD

    def preparation_steps(self, order: Order) -> list[str]:
        return [
            f"Preparing standard order {order.id}",
            "Standard packaging applied",
            "Estimated delivery: 5 business days",
        ]


class ExpressOrderHandler(OrderHandler):

    @property
    def supported_type(self) -> OrderType:
        return OrderType.EXPRESS

    def preparation_steps(self, order: Order) -> list[str]:
        return [
            f"Preparing express order {order.id}",
            "Priority packaging applied",
            "Marked as high priority",
            "Estimated delivery: 2 business days",
        ]


class InternationalOrderHandler(OrderHandler):

    @property
    def supported_type(self) -> OrderType:
        return OrderType.INTERNATIONAL

    def preparation_steps(self, order: Order) -> list[str]:
        return [
            f"Preparing international order {order.id}",
            f"Customs documentation prepared for {order.shipping_address}",
            "Export compliance check completed",
            "International packaging applied",
            "Estimated delivery: 10-14 business days",
        ]


class OrderHandlerRegistry:
    """Lookup of handlers keyed by order type.

    There is no fallback handler: asking for a type nobody registered is
    a wiring mistake and raises ConfigurationError.
    """

    def __init__(self, handlers: Iterable[OrderHandler] = ()) -> None:
        self._handlers: dict[OrderType, OrderHandler] = {}
        for handler in handlers:
            self.register(handler)

    def register(self, handler: OrderHandler) -> None:
        self._handlers[handler.supported_type] = handler

    def get_handler(self, order_type: OrderType) -> OrderHandler:
        try:
            return self._handlers[order_type]
        except KeyError:
            raise ConfigurationError(
                f"No order handler registered for order type {order_type!r}"
            ) from None

    @property
    def supported_types(self) -> frozenset[OrderType]:
        return frozenset(self._handlers)

    @staticmethod
    def default() -> OrderHandlerRegistry:
        return OrderHandlerRegistry(
            [StandardOrderHandler(), ExpressOrderHandler(), InternationalOrderHandler()]
        )
