"""Domain service: Order validation.

Checks the data an order needs before it can enter fulfillment.  Every
violation is collected, so the caller sees the full list at once rather
than fixing problems one round-trip at a time.
"""

from __future__ import annotations

from dataclasses import dataclass

from fulfillment.domain.model.order import Order


@dataclass(frozen=True)
class ValidationResult:
    errors: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors


class OrderValidator:
    """Stateless validator; safe to share between orchestrators.

    A unit price of exactly zero is rejected along with negative
    prices: free items are not something this pipeline sells.
    """

    def validate(self, order: Order) -> ValidationResult:
        errors: list[str] = []

        if not order.customer_id or not order.customer_id.strip():
            errors.append("Customer ID is required")

        if not order.customer_email or not order.customer_email.strip():
            errors.append("Customer email is required")

        if not order.shipping_address or not order.shipping_address.strip():
            errors.append("Shipping address is required")

        if not order.items:
            errors.append("Order must contain at least one item")

        for item in order.items:
            if item.quantity <= 0:
                errors.append(f"Invalid quantity for {item.product_name}")
            if item.unit_price.is_zero:
                errors.append(f"Invalid price for {item.product_name}")

        return ValidationResult(errors=tuple(errors))
