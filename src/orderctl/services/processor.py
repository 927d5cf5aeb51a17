"""OrderProcessor — price, total, and persist a validated order.

Pipeline: PRICE → TOTAL → SAVE → RESPOND

Single pass, no retries. Storage is only called once every product has an
acceptable price, so a failed run never leaves a partial order behind.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING

import structlog

from orderctl.domain.errors import OrderError, OrderProcessingFailure
from orderctl.domain.order import LineItem, OrderDetails, OrderReceipt
from orderctl.domain.pricing import ZeroPricePolicy, check_unit_price, to_decimal

if TYPE_CHECKING:
    from collections.abc import Iterable

    from orderctl.domain.values import OrderId, ProductId
    from orderctl.infrastructure.pricing import PriceLookup
    from orderctl.infrastructure.storage import OrderStorage

logger = logging.getLogger(__name__)


class OrderProcessor:
    """Runs the order workflow against pricing and storage collaborators.

    Usage::

        processor = OrderProcessor(FixedRatePricing(), InMemoryOrderStorage())
        receipt = processor.process_order(details)
    """

    def __init__(
        self,
        pricing: PriceLookup,
        storage: OrderStorage,
        *,
        zero_price: ZeroPricePolicy = ZeroPricePolicy.REJECT,
    ) -> None:
        self._pricing = pricing
        self._storage = storage
        self._zero_price = zero_price

    @property
    def zero_price(self) -> ZeroPricePolicy:
        return self._zero_price

    def process_order(self, details: OrderDetails) -> OrderReceipt:
        """Price every product, sum the total, and save the order.

        Raises:
            OrderError: A domain rule failed (propagated unchanged).
            OrderProcessingFailure: A collaborator raised anything else.
        """
        order_id = details.order_id
        with structlog.contextvars.bound_contextvars(order_id=order_id.value):
            try:
                line_items = self._price_items(details.product_ids)
                total = sum((item.price for item in line_items), Decimal(0))
                self._storage.save(order_id, details.customer_id, total)
            except OrderError as exc:
                logger.info("Order rejected: %s", exc)
                raise
            except Exception as exc:
                logger.error("Order failed: %s", exc, exc_info=True)
                raise OrderProcessingFailure(order_id, exc) from exc

            logger.debug("Order processed with %d items, total %s", len(line_items), total)

        return OrderReceipt(
            order_id=order_id,
            customer_id=details.customer_id,
            total=total,
            line_items=line_items,
        )

    def get_order_information(self, order_id: OrderId) -> str:
        """Return the storage collaborator's description of *order_id*.

        Raises:
            OrderError: Storage rejected the lookup (propagated unchanged).
            OrderProcessingFailure: Storage raised anything else.
        """
        with structlog.contextvars.bound_contextvars(order_id=order_id.value):
            try:
                return self._storage.get_info(order_id)
            except OrderError:
                raise
            except Exception as exc:
                logger.error("Order lookup failed: %s", exc, exc_info=True)
                raise OrderProcessingFailure(order_id, exc) from exc

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _price_items(self, product_ids: Iterable[ProductId]) -> tuple[LineItem, ...]:
        items: list[LineItem] = []
        for product_id in product_ids:
            price = to_decimal(self._pricing.get_price(product_id))
            check_unit_price(product_id, price, self._zero_price)
            logger.debug("Priced product %s at %s", product_id, price)
            items.append(LineItem(product_id=product_id, price=price))
        return tuple(items)
