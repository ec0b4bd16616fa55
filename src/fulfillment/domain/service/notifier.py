"""Port for customer notifications.

Fire-and-forget: implementations make no delivery guarantee.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from fulfillment.domain.model.order import Order


class Notifier(ABC):

    @abstractmethod
    def send_order_confirmation(self, order: Order) -> None:
        """Tell the customer the order was accepted and charged."""

    @abstractmethod
    def send_shipping_notification(self, order: Order) -> None:
        """Tell the customer the order shipped, with its tracking number."""
