"""OrderService — raw inputs in, ServiceResult out.

Pipeline: VALIDATE → PROCESS → RESPOND

Wraps :class:`OrderProcessor` for callers that hold primitives (CLI flags,
request bodies) and prefer explicit error values over exceptions.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from orderctl.domain.errors import OrderError
from orderctl.domain.order import OrderDetails
from orderctl.domain.values import OrderId
from orderctl.services.contracts import OrderInfoData, dump_validated, process_order_payload
from orderctl.services.result import ServiceResult

if TYPE_CHECKING:
    from orderctl.services.processor import OrderProcessor

logger = logging.getLogger(__name__)


def _error_result(op: str, exc: OrderError) -> ServiceResult:
    return ServiceResult.failure(op, exc.code, str(exc), exc.detail())


class OrderService:
    """Validates raw order input and runs it through the processor."""

    def __init__(self, processor: OrderProcessor) -> None:
        self._processor = processor

    def process_order(
        self,
        order_id: int,
        product_ids: Iterable[int] | None,
        customer_id: int,
        customer_name: str,
        address: str,
    ) -> ServiceResult:
        """Validate and process one order.

        Error codes: ``INVALID_ARGUMENT``, ``EMPTY_ORDER``,
        ``DUPLICATE_PRODUCT``, ``INVALID_PRICE``, ``PRICE_UNAVAILABLE``,
        ``PROCESSING_FAILED``.
        """
        op = "process_order"

        # ── VALIDATE ─────────────────────────────────────────
        try:
            details = OrderDetails.from_raw(
                order_id=order_id,
                customer_id=customer_id,
                customer_name=customer_name,
                delivery_address=address,
                product_ids=product_ids,
            )
        except OrderError as exc:
            logger.debug("Rejected order input: %s", exc)
            return _error_result(op, exc)

        # ── PROCESS ──────────────────────────────────────────
        try:
            receipt = self._processor.process_order(details)
        except OrderError as exc:
            return _error_result(op, exc)

        # ── RESPOND ──────────────────────────────────────────
        warnings: list[str] = []
        if any(item.price == 0 for item in receipt.line_items):
            warnings.append("Order contains zero-priced items")
        return ServiceResult.success(
            op,
            process_order_payload(details, receipt),
            warnings=warnings,
        )

    def order_info(self, order_id: int) -> ServiceResult:
        """Look up the stored description of an order."""
        op = "order_info"
        try:
            oid = OrderId(order_id)
        except OrderError as exc:
            return _error_result(op, exc)

        try:
            info = self._processor.get_order_information(oid)
        except OrderError as exc:
            return _error_result(op, exc)

        return ServiceResult.success(
            op,
            dump_validated(OrderInfoData, {"order_id": oid.value, "info": info}),
        )
