"""Order error hierarchy.

Every business rule violation is an :class:`OrderError` subclass carrying a
stable ``code``. The workflow lets these propagate unchanged and wraps
anything else in :class:`OrderProcessingFailure`.
"""

from __future__ import annotations

from typing import Any


class OrderError(Exception):
    """Base class for all order-processing errors."""

    code = "ORDER_ERROR"

    def detail(self) -> dict[str, Any]:
        """Structured context for result payloads."""
        return {}


class InvalidArgument(OrderError, ValueError):
    """A raw value failed an identifier, name, or address constraint."""

    code = "INVALID_ARGUMENT"

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field

    def detail(self) -> dict[str, Any]:
        return {"field": self.field}


class EmptyOrder(OrderError):
    """The order contains no products."""

    code = "EMPTY_ORDER"

    def __init__(self) -> None:
        super().__init__("Order must contain at least one product")


class DuplicateProduct(OrderError):
    """The same product identifier appears more than once."""

    code = "DUPLICATE_PRODUCT"

    def __init__(self, product_id: object) -> None:
        super().__init__(f"Duplicate product in order: {product_id}")
        self.product_id = product_id

    def detail(self) -> dict[str, Any]:
        return {"product_id": str(self.product_id)}


class InvalidPrice(OrderError):
    """The pricing collaborator returned an unacceptable unit price."""

    code = "INVALID_PRICE"

    def __init__(self, product_id: object, price: object) -> None:
        super().__init__(f"Invalid price for product {product_id}: {price}")
        self.product_id = product_id
        self.price = price

    def detail(self) -> dict[str, Any]:
        return {"product_id": str(self.product_id), "price": str(self.price)}


class PriceUnavailable(OrderError):
    """The pricing collaborator has no price for a product."""

    code = "PRICE_UNAVAILABLE"

    def __init__(self, product_id: object) -> None:
        super().__init__(f"No price available for product {product_id}")
        self.product_id = product_id

    def detail(self) -> dict[str, Any]:
        return {"product_id": str(self.product_id)}


class OrderProcessingFailure(OrderError):
    """An unexpected collaborator error, wrapped with the order it broke."""

    code = "PROCESSING_FAILED"

    def __init__(self, order_id: object, cause: BaseException) -> None:
        super().__init__(f"Failed to process order {order_id}: {cause}")
        self.order_id = order_id
        self.cause = cause

    def detail(self) -> dict[str, Any]:
        return {
            "order_id": str(self.order_id),
            "cause": type(self.cause).__name__,
        }
