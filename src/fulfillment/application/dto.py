"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from fulfillment.domain.model.capabilities import capabilities_for
from fulfillment.domain.model.order import Order


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single line item as displayed to the user."""

    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    customer_name: str
    order_type: str
    status: str
    items: list[OrderItemDTO]
    subtotal: str
    discount: str
    tax: str
    shipping: str
    total: str
    order_date: str
    shipped_date: str | None
    tracking_number: str | None
    payment: str | None
    capabilities: list[str]

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            customer_name=order.customer_name,
            order_type=order.order_type.value,
            status=order.status.value,
            items=[
                OrderItemDTO(
                    product_name=item.product_name,
                    quantity=item.quantity,
                    unit_price=str(item.unit_price),
                    line_total=str(item.line_total),
                )
                for item in order.items
            ],
            subtotal=str(order.subtotal),
            discount=str(order.discount_amount),
            tax=str(order.tax_amount),
            shipping=str(order.shipping_cost),
            total=str(order.total),
            order_date=order.order_date.strftime("%Y-%m-%d %H:%M UTC"),
            shipped_date=(
                order.shipped_date.strftime("%Y-%m-%d %H:%M UTC")
                if order.shipped_date
                else None
            ),
            tracking_number=order.tracking_number,
            payment=(
                f"{order.payment.method} {order.payment.transaction_id}"
                if order.payment
                else None
            ),
            capabilities=sorted(c.value.lower() for c in capabilities_for(order)),
        )
