"""Discount strategies.

A strategy returns a non-negative discount no larger than the order's
item subtotal.  New strategies plug into the fulfillment pipeline
without touching it.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Iterable

from fulfillment.domain.exceptions import ConfigurationError
from fulfillment.domain.model.order import Order
from fulfillment.domain.model.value_objects import Money

logger = logging.getLogger(__name__)

BULK_QUANTITY_THRESHOLD = 20
BULK_DISCOUNT_RATE = Decimal("0.15")
VIP_DISCOUNT_RATE = Decimal("0.10")


def _check_rate(rate: Decimal) -> Decimal:
    if not isinstance(rate, Decimal) or not Decimal("0") <= rate <= Decimal("1"):
        raise ConfigurationError(f"Discount rate must be a Decimal in [0, 1], got {rate!r}")
    return rate


class DiscountStrategy(ABC):

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def calculate_discount(self, order: Order) -> Money: ...


class NoDiscount(DiscountStrategy):

    @property
    def name(self) -> str:
        return "No Discount"

    def calculate_discount(self, order: Order) -> Money:
        return Money.zero()


class PercentageDiscount(DiscountStrategy):
    """Flat percentage off the subtotal; ``PercentageDiscount(5)`` is 5% off."""

    def __init__(self, percentage: Decimal | int) -> None:
        self._percentage = Decimal(percentage)
        _check_rate(self._percentage / 100)

    @property
    def name(self) -> str:
        return f"{self._percentage}% Off"

    def calculate_discount(self, order: Order) -> Money:
        discount = order.items_subtotal * (self._percentage / 100)
        logger.info("Applying %s%% discount: %s", self._percentage, discount)
        return discount


class BulkOrderDiscount(DiscountStrategy):

    def __init__(
        self,
        threshold: int = BULK_QUANTITY_THRESHOLD,
        rate: Decimal = BULK_DISCOUNT_RATE,
    ) -> None:
        if threshold <= 0:
            raise ConfigurationError("Bulk discount threshold must be positive")
        self._threshold = threshold
        self._rate = _check_rate(rate)

    @property
    def name(self) -> str:
        return "Bulk Order Discount"

    def calculate_discount(self, order: Order) -> Money:
        total_items = order.total_quantity
        if total_items < self._threshold:
            return Money.zero()
        discount = order.items_subtotal * self._rate
        logger.info("Bulk order (%d items): %s", total_items, discount)
        return discount


class CustomerAllowlistDiscount(DiscountStrategy):
    """Fixed rate for customers on an allowlist (VIP customers)."""

    def __init__(self, customer_ids: Iterable[str], rate: Decimal = VIP_DISCOUNT_RATE) -> None:
        self._customer_ids = frozenset(customer_ids)
        self._rate = _check_rate(rate)

    @property
    def name(self) -> str:
        return "VIP Customer Discount"

    @property
    def customer_ids(self) -> frozenset[str]:
        return self._customer_ids

    def calculate_discount(self, order: Order) -> Money:
        if order.customer_id not in self._customer_ids:
            return Money.zero()
        discount = order.items_subtotal * self._rate
        logger.info("VIP customer discount: %s", discount)
        return discount
