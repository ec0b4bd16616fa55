"""Payment processors and the gateway that looks them up by key.

Processors are simulated: they log what a real integration would do and
always succeed.  Each charge gets a fresh transaction id.
"""

from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod

from fulfillment.domain.exceptions import ConfigurationError
from fulfillment.domain.model.order import Order, PaymentRecord

logger = logging.getLogger(__name__)


def new_transaction_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:8].upper()}"


class PaymentProcessor(ABC):
    transaction_prefix: str

    @property
    @abstractmethod
    def name(self) -> str: ...

    def process_payment(self, order: Order) -> PaymentRecord:
        logger.info("Processing %s payment of %s for order %s", self.name, order.total, order.id)
        for step in self.steps(order):
            logger.debug("[%s] %s", self.name, step)
        return PaymentRecord(
            method=self.name,
            transaction_id=new_transaction_id(self.transaction_prefix),
            amount=order.total,
            processed=True,
        )

    @abstractmethod
    def steps(self, order: Order) -> list[str]:
        """What the integration does to charge the customer."""


class CreditCardPayment(PaymentProcessor):
    transaction_prefix = "CC"

    @property
    def name(self) -> str:
        return "Credit Card"

    def steps(self, order: Order) -> list[str]:
        return [
            "Validating card number",
            "Checking CVV and expiry date",
            "Contacting card processor",
            "Transaction approved",
        ]


class PayPalPayment(PaymentProcessor):
    transaction_prefix = "PP"

    @property
    def name(self) -> str:
        return "PayPal"

    def steps(self, order: Order) -> list[str]:
        return [
            "Redirecting to PayPal",
            f"PayPal account: {order.customer_email}",
            "Authorizing payment",
            "Transaction completed",
        ]


class BankTransferPayment(PaymentProcessor):
    transaction_prefix = "BT"

    @property
    def name(self) -> str:
        return "Bank Transfer"

    def steps(self, order: Order) -> list[str]:
        return ["IBAN validation", "Initiating transfer", "Transfer queued"]


class CryptocurrencyPayment(PaymentProcessor):
    transaction_prefix = "CRYPTO"

    def __init__(self, currency: str = "Bitcoin") -> None:
        self._currency = currency

    @property
    def name(self) -> str:
        return "Cryptocurrency"

    def steps(self, order: Order) -> list[str]:
        return [
            f"Cryptocurrency: {self._currency}",
            "Broadcasting transaction to blockchain",
            "Waiting for confirmations",
            "Transaction confirmed",
        ]


class PaymentGateway:
    """Registry of payment processors keyed by a case-insensitive name."""

    def __init__(self) -> None:
        self._processors: dict[str, PaymentProcessor] = {}

    def register(self, key: str, processor: PaymentProcessor) -> None:
        self._processors[key.lower()] = processor

    def get(self, key: str) -> PaymentProcessor:
        try:
            return self._processors[key.lower()]
        except KeyError:
            raise ConfigurationError(
                f"Payment processor '{key}' not found "
                f"(available: {', '.join(self.available_processors()) or 'none'})"
            ) from None

    def available_processors(self) -> list[str]:
        return sorted(self._processors)

    @staticmethod
    def default() -> PaymentGateway:
        gateway = PaymentGateway()
        gateway.register("credit-card", CreditCardPayment())
        gateway.register("paypal", PayPalPayment())
        gateway.register("bank-transfer", BankTransferPayment())
        gateway.register("crypto", CryptocurrencyPayment())
        return gateway
