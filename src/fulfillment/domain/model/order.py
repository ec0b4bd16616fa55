"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its line items and walks a
fixed status sequence while the fulfillment pipeline runs:

    CREATED -> VALIDATED -> PAYMENT_PROCESSED -> READY_TO_SHIP
            -> SHIPPED -> DELIVERED

CANCELLED is a side branch reachable from any state before SHIPPED.
All transitions go through the methods below; nothing else should
assign ``status``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Sequence

from fulfillment.domain.exceptions import (
    InvalidStatusTransitionError,
    ValidationError,
)
from fulfillment.domain.model.value_objects import Money


class OrderType(Enum):
    STANDARD = "STANDARD"
    EXPRESS = "EXPRESS"
    INTERNATIONAL = "INTERNATIONAL"


class OrderStatus(Enum):
    CREATED = "CREATED"
    VALIDATED = "VALIDATED"
    PAYMENT_PROCESSED = "PAYMENT_PROCESSED"
    READY_TO_SHIP = "READY_TO_SHIP"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


# Statuses from which an explicit cancel is still allowed.
CANCELLABLE_STATUSES = frozenset(
    {
        OrderStatus.CREATED,
        OrderStatus.VALIDATED,
        OrderStatus.PAYMENT_PROCESSED,
        OrderStatus.READY_TO_SHIP,
    }
)


@dataclass(frozen=True)
class OrderItem:
    """A single line of an order.

    ``quantity`` is a plain int so the validator can report a
    non-positive quantity instead of failing at construction.
    """

    product_id: str
    product_name: str
    quantity: int
    unit_price: Money

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class PaymentRecord:
    method: str
    transaction_id: str
    amount: Money
    processed: bool = True


@dataclass(frozen=True)
class ShippingQuote:
    carrier: str
    cost: Money
    estimated_days: int


@dataclass
class Order:
    """Aggregate root for orders going through fulfillment.

    Created by the caller with identity, customer data and items
    populated, then mutated in place by each pipeline stage.
    """

    id: str
    customer_id: str
    customer_name: str
    customer_email: str
    shipping_address: str
    items: Sequence[OrderItem]
    order_type: OrderType = OrderType.STANDARD
    status: OrderStatus = OrderStatus.CREATED
    subtotal: Money = field(default_factory=Money.zero)
    discount_amount: Money = field(default_factory=Money.zero)
    tax_amount: Money = field(default_factory=Money.zero)
    shipping_cost: Money = field(default_factory=Money.zero)
    total: Money = field(default_factory=Money.zero)
    order_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    shipped_date: datetime | None = None
    tracking_number: str | None = None
    carrier: str | None = None
    payment: PaymentRecord | None = None
    refunded_amount: Money = field(default_factory=Money.zero)

    # --- Line items -----------------------------------------------------------

    def add_item(self, item: OrderItem) -> None:
        """Append a line item.  Only allowed before validation."""
        if self.status != OrderStatus.CREATED:
            raise ValidationError(
                f"Cannot add items to order {self.id} in {self.status.value} status"
            )
        self.items = [*self.items, item]

    @property
    def items_subtotal(self) -> Money:
        """Sum of all line totals, available before pricing has run."""
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)

    # --- Pricing inputs -------------------------------------------------------

    def apply_discount(self, amount: Money) -> None:
        if amount > self.items_subtotal:
            raise ValidationError(
                f"Discount {amount} exceeds order subtotal {self.items_subtotal}"
            )
        self.discount_amount = amount

    def apply_shipping(self, quote: ShippingQuote) -> None:
        self.carrier = quote.carrier
        self.shipping_cost = quote.cost

    # --- State transitions ----------------------------------------------------

    def mark_validated(self) -> None:
        """Transition CREATED -> VALIDATED and freeze the line items."""
        self._transition(OrderStatus.CREATED, OrderStatus.VALIDATED)
        self.items = tuple(self.items)

    def record_payment(self, payment: PaymentRecord) -> None:
        """Transition VALIDATED -> PAYMENT_PROCESSED."""
        if not payment.processed:
            raise ValidationError(
                f"Payment {payment.transaction_id} for order {self.id} was not processed"
            )
        self._transition(OrderStatus.VALIDATED, OrderStatus.PAYMENT_PROCESSED)
        self.payment = payment

    def mark_ready_to_ship(self) -> None:
        self._transition(OrderStatus.PAYMENT_PROCESSED, OrderStatus.READY_TO_SHIP)

    def mark_shipped(self, tracking_number: str) -> None:
        """Transition READY_TO_SHIP -> SHIPPED, stamping tracking data."""
        if not tracking_number:
            raise ValidationError("Tracking number is required to ship an order")
        self._transition(OrderStatus.READY_TO_SHIP, OrderStatus.SHIPPED)
        self.tracking_number = tracking_number
        self.shipped_date = datetime.now(timezone.utc)

    def mark_delivered(self) -> None:
        self._transition(OrderStatus.SHIPPED, OrderStatus.DELIVERED)

    def cancel(self) -> None:
        """Transition any pre-shipment status -> CANCELLED."""
        if self.status == OrderStatus.CANCELLED:
            raise InvalidStatusTransitionError(f"Order {self.id} is already cancelled")
        if self.status not in CANCELLABLE_STATUSES:
            raise InvalidStatusTransitionError(
                f"Cannot cancel order {self.id} in {self.status.value} status"
            )
        self.status = OrderStatus.CANCELLED

    # --- Internal helpers -----------------------------------------------------

    def _transition(self, expected: OrderStatus, target: OrderStatus) -> None:
        if self.status != expected:
            raise InvalidStatusTransitionError(
                f"Cannot move order {self.id} to {target.value} — current status "
                f"is {self.status.value}, expected {expected.value}"
            )
        self.status = target
