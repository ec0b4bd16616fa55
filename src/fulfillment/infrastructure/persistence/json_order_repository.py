"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from fulfillment.domain.model.order import (
    Order,
    OrderItem,
    OrderStatus,
    OrderType,
    PaymentRecord,
)
from fulfillment.domain.model.value_objects import Money
from fulfillment.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def save(self, order: Order) -> None:
        orders = self._load_raw()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                replaced = True
                break
        if not replaced:
            orders.append(self._to_raw(order))

        self._persist_raw(orders)
        logger.info("Order %s saved to %s", order.id, self._file_path)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_id": order.customer_id,
            "customer_name": order.customer_name,
            "customer_email": order.customer_email,
            "shipping_address": order.shipping_address,
            "order_type": order.order_type.value,
            "status": order.status.value,
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity,
                    "unit_price": str(item.unit_price.amount),
                }
                for item in order.items
            ],
            "subtotal": str(order.subtotal.amount),
            "discount_amount": str(order.discount_amount.amount),
            "tax_amount": str(order.tax_amount.amount),
            "shipping_cost": str(order.shipping_cost.amount),
            "total": str(order.total.amount),
            "currency": order.total.currency,
            "order_date": order.order_date.isoformat(),
            "shipped_date": order.shipped_date.isoformat() if order.shipped_date else None,
            "tracking_number": order.tracking_number,
            "carrier": order.carrier,
            "payment": (
                {
                    "method": order.payment.method,
                    "transaction_id": order.payment.transaction_id,
                    "amount": str(order.payment.amount.amount),
                    "processed": order.payment.processed,
                }
                if order.payment
                else None
            ),
            "refunded_amount": str(order.refunded_amount.amount),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw.get("currency", "USD")

        def money(key: str, source: dict = raw) -> Money:
            return Money(Decimal(source.get(key, "0")), currency)

        items = tuple(
            OrderItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=i["quantity"],
                unit_price=money("unit_price", i),
            )
            for i in raw["items"]
        )
        payment = raw.get("payment")
        shipped_date = raw.get("shipped_date")
        return Order(
            id=raw["id"],
            customer_id=raw["customer_id"],
            customer_name=raw["customer_name"],
            customer_email=raw["customer_email"],
            shipping_address=raw["shipping_address"],
            items=items,
            order_type=OrderType(raw["order_type"]),
            status=OrderStatus(raw["status"]),
            subtotal=money("subtotal"),
            discount_amount=money("discount_amount"),
            tax_amount=money("tax_amount"),
            shipping_cost=money("shipping_cost"),
            total=money("total"),
            order_date=datetime.fromisoformat(raw["order_date"]),
            shipped_date=datetime.fromisoformat(shipped_date) if shipped_date else None,
            tracking_number=raw.get("tracking_number"),
            carrier=raw.get("carrier"),
            payment=(
                PaymentRecord(
                    method=payment["method"],
                    transaction_id=payment["transaction_id"],
                    amount=money("amount", payment),
                    processed=payment["processed"],
                )
                if payment
                else None
            ),
            refunded_amount=money("refunded_amount"),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
