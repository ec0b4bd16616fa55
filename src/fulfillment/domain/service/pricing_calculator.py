"""Domain service: Order pricing.

Derives subtotal, tax and total from the line items plus the discount
and shipping cost already applied to the order.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from fulfillment.domain.exceptions import ConfigurationError
from fulfillment.domain.model.order import Order

logger = logging.getLogger(__name__)

DEFAULT_TAX_RATE = Decimal("0.20")


class PricingCalculator:

    def __init__(self, tax_rate: Decimal = DEFAULT_TAX_RATE) -> None:
        if not isinstance(tax_rate, Decimal) or not Decimal("0") <= tax_rate < Decimal("1"):
            raise ConfigurationError(f"Tax rate must be a Decimal in [0, 1), got {tax_rate!r}")
        self._tax_rate = tax_rate

    @property
    def tax_rate(self) -> Decimal:
        return self._tax_rate

    def calculate(self, order: Order) -> None:
        """Set ``subtotal``, ``tax_amount`` and ``total`` on the order.

        total = subtotal + tax + shipping - discount.  No rounding is
        applied here; see ``Money`` for the display rounding policy.
        """
        order.subtotal = order.items_subtotal
        order.tax_amount = order.subtotal * self._tax_rate
        order.total = (
            order.subtotal + order.tax_amount + order.shipping_cost
        ) - order.discount_amount

        logger.debug(
            "Pricing for %s: subtotal=%s tax=%s shipping=%s discount=%s total=%s",
            order.id,
            order.subtotal,
            order.tax_amount,
            order.shipping_cost,
            order.discount_amount,
            order.total,
        )
