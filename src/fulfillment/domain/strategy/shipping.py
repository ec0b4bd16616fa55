"""Shipping providers.

Each provider quotes a fixed carrier, cost and transit time; nothing
depends on weight or destination.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from fulfillment.domain.model.order import Order, ShippingQuote
from fulfillment.domain.model.value_objects import Money


class ShippingProvider(ABC):

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def calculate_shipping(self, order: Order) -> ShippingQuote: ...


class _FlatRateShipping(ShippingProvider):
    carrier: str
    cost: Decimal
    estimated_days: int

    def calculate_shipping(self, order: Order) -> ShippingQuote:
        return ShippingQuote(
            carrier=self.carrier,
            cost=Money(self.cost),
            estimated_days=self.estimated_days,
        )


class StandardShipping(_FlatRateShipping):
    carrier = "USPS"
    cost = Decimal("9.99")
    estimated_days = 5

    @property
    def name(self) -> str:
        return "Standard Shipping"


class ExpressShipping(_FlatRateShipping):
    carrier = "FedEx"
    cost = Decimal("24.99")
    estimated_days = 2

    @property
    def name(self) -> str:
        return "Express Shipping"


class InternationalShipping(_FlatRateShipping):
    carrier = "DHL"
    cost = Decimal("49.99")
    estimated_days = 10

    @property
    def name(self) -> str:
        return "International Shipping"
