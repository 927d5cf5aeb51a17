"""Order storage collaborators.

Persistence is out of scope: :class:`LoggingOrderStorage` reports saves as
log records and :class:`InMemoryOrderStorage` keeps them for the lifetime
of the process. Real backends implement :class:`OrderStorage`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from orderctl.domain.values import CustomerId, OrderId

logger = logging.getLogger(__name__)


class OrderStorage(Protocol):
    """Persistence contract consumed by the order workflow."""

    def save(self, order_id: OrderId, customer_id: CustomerId, total: Decimal) -> None: ...

    def get_info(self, order_id: OrderId) -> str: ...


@dataclass(frozen=True)
class SavedOrder:
    """One ``save`` call as recorded by :class:`InMemoryOrderStorage`."""

    order_id: OrderId
    customer_id: CustomerId
    total: Decimal


class LoggingOrderStorage:
    """Storage stub that only logs what would be saved."""

    def save(self, order_id: OrderId, customer_id: CustomerId, total: Decimal) -> None:
        logger.info(
            "Order %s saved for customer %s with total %s",
            order_id,
            customer_id,
            total,
        )

    def get_info(self, order_id: OrderId) -> str:
        return f"Order {order_id} info"


class InMemoryOrderStorage:
    """Storage that records saved orders in insertion order."""

    def __init__(self) -> None:
        self.saved: list[SavedOrder] = []

    def save(self, order_id: OrderId, customer_id: CustomerId, total: Decimal) -> None:
        self.saved.append(SavedOrder(order_id=order_id, customer_id=customer_id, total=total))
        logger.debug("Recorded order %s in memory", order_id)

    def get_info(self, order_id: OrderId) -> str:
        # Latest save wins if an order id was saved more than once.
        for record in reversed(self.saved):
            if record.order_id == order_id:
                return (
                    f"Order {record.order_id} for customer {record.customer_id}"
                    f" with total {record.total}"
                )
        return f"Order {order_id} has not been saved"
