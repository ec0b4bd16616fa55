"""Simulated SMS notifications."""

from __future__ import annotations

import logging

from fulfillment.domain.model.order import Order
from fulfillment.domain.service.notifier import Notifier

logger = logging.getLogger(__name__)


class SmsNotifier(Notifier):

    def send_order_confirmation(self, order: Order) -> None:
        logger.info("[SMS] Order %s confirmed. Total: %s", order.id, order.total)

    def send_shipping_notification(self, order: Order) -> None:
        logger.info("[SMS] Order %s shipped. Track: %s", order.id, order.tracking_number)
