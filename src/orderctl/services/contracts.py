"""Typed payload contracts for the service boundary.

Payloads are validated before they leave the service layer so shape
regressions fail fast in tests rather than in CLI output.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel

from orderctl.domain.order import OrderDetails, OrderReceipt


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class LineItemData(BaseModel):
    """One priced product."""

    product_id: int
    price: Decimal


class ProcessOrderData(BaseModel):
    """Payload contract for ``OrderService.process_order``."""

    order_id: int
    customer_id: int
    customer_name: str
    delivery_address: str
    line_items: list[LineItemData]
    item_count: int
    total: Decimal
    message: str


class OrderInfoData(BaseModel):
    """Payload contract for ``OrderService.order_info``."""

    order_id: int
    info: str


def process_order_payload(details: OrderDetails, receipt: OrderReceipt) -> dict[str, Any]:
    """Build the validated success payload for a processed order."""
    return dump_validated(
        ProcessOrderData,
        {
            "order_id": receipt.order_id.value,
            "customer_id": receipt.customer_id.value,
            "customer_name": details.customer_name.value,
            "delivery_address": details.delivery_address.value,
            "line_items": [
                {"product_id": item.product_id.value, "price": item.price}
                for item in receipt.line_items
            ],
            "item_count": len(receipt.line_items),
            "total": receipt.total,
            "message": receipt.message,
        },
    )
