"""Order capabilities.

What a client may do with an order (cancel it, change where it goes,
refund it, track it) depends on where the order is in its lifecycle.
Instead of one fat interface that raises for unsupported operations,
``OrderCapabilities.of(order)`` hands out a narrow object per supported
capability and ``None`` for the rest, so an unsupported call cannot be
written without first checking for it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from fulfillment.domain.exceptions import CapabilityNotSupportedError, ValidationError
from fulfillment.domain.model.order import CANCELLABLE_STATUSES, Order, OrderStatus
from fulfillment.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class Capability(Enum):
    CANCEL = "CANCEL"
    MODIFY = "MODIFY"
    REFUND = "REFUND"
    TRACK = "TRACK"


_MODIFIABLE_STATUSES = frozenset({OrderStatus.CREATED, OrderStatus.VALIDATED})
_TRACKABLE_STATUSES = frozenset({OrderStatus.SHIPPED, OrderStatus.DELIVERED})
_NON_REFUNDABLE_STATUSES = frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED})


def refundable_amount(order: Order) -> Money:
    if order.payment is None or not order.payment.processed:
        return Money.zero()
    if order.refunded_amount >= order.payment.amount:
        return Money.zero()
    return order.payment.amount - order.refunded_amount


def capabilities_for(order: Order) -> frozenset[Capability]:
    """Derive the capability flags for an order from its current state."""
    caps: set[Capability] = set()
    if order.status in CANCELLABLE_STATUSES:
        caps.add(Capability.CANCEL)
    if order.status in _MODIFIABLE_STATUSES:
        caps.add(Capability.MODIFY)
    if (
        order.status not in _NON_REFUNDABLE_STATUSES
        and not refundable_amount(order).is_zero
    ):
        caps.add(Capability.REFUND)
    if order.status in _TRACKABLE_STATUSES and order.tracking_number:
        caps.add(Capability.TRACK)
    return frozenset(caps)


class CancellableOrder:

    def __init__(self, order: Order) -> None:
        self._order = order

    def cancel(self) -> None:
        self._order.cancel()
        logger.info("Order %s has been cancelled", self._order.id)


class ModifiableOrder:

    def __init__(self, order: Order) -> None:
        self._order = order

    def update_shipping_address(self, address: str) -> None:
        if not address or not address.strip():
            raise ValidationError("Shipping address is required")
        self._order.shipping_address = address.strip()
        logger.info("Order %s shipping address updated to: %s", self._order.id, address)


class RefundableOrder:

    def __init__(self, order: Order) -> None:
        self._order = order

    @property
    def remaining(self) -> Money:
        return refundable_amount(self._order)

    def refund(self, amount: Money) -> Money:
        """Refund part or all of the captured payment.

        Returns the amount still refundable afterwards.
        """
        if amount.is_zero:
            raise ValidationError("Refund amount must be positive")
        if amount > self.remaining:
            raise ValidationError(
                f"Cannot refund {amount} for order {self._order.id} "
                f"— only {self.remaining} refundable"
            )
        self._order.refunded_amount = self._order.refunded_amount + amount
        logger.info("Refund of %s processed for order %s", amount, self._order.id)
        return self.remaining


class TrackableOrder:

    def __init__(self, order: Order) -> None:
        self._order = order

    @property
    def tracking_number(self) -> str:
        return self._order.tracking_number or ""

    def tracking_url(self) -> str:
        if self._order.status == OrderStatus.DELIVERED:
            return f"https://tracking.example.com/delivered/{self.tracking_number}"
        carrier = (self._order.carrier or self.tracking_number.split("-", 1)[0]).lower()
        return f"https://{carrier}.com/track?number={self.tracking_number}"


@dataclass(frozen=True)
class OrderCapabilities:
    """Capability view over an order, computed once from its state.

    The view is a snapshot: take a fresh one after the order changes
    status.
    """

    flags: frozenset[Capability]
    cancellable: CancellableOrder | None = None
    modifiable: ModifiableOrder | None = None
    refundable: RefundableOrder | None = None
    trackable: TrackableOrder | None = None

    @staticmethod
    def of(order: Order) -> OrderCapabilities:
        flags = capabilities_for(order)
        return OrderCapabilities(
            flags=flags,
            cancellable=CancellableOrder(order) if Capability.CANCEL in flags else None,
            modifiable=ModifiableOrder(order) if Capability.MODIFY in flags else None,
            refundable=RefundableOrder(order) if Capability.REFUND in flags else None,
            trackable=TrackableOrder(order) if Capability.TRACK in flags else None,
        )

    def supports(self, capability: Capability) -> bool:
        return capability in self.flags

    def require(self, capability: Capability, order_id: str) -> None:
        """Raise if *capability* is missing; for callers driven by user input."""
        if capability not in self.flags:
            raise CapabilityNotSupportedError(
                f"Order {order_id} does not support {capability.value.lower()}"
            )
