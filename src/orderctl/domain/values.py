"""Identifier and text value objects.

Each value object validates its raw input in ``__post_init__`` and is frozen
afterwards. A violation raises :class:`InvalidArgument` naming the field.

INVARIANT: a constructed value object always holds a valid value.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderctl.domain.errors import InvalidArgument

CUSTOMER_NAME_MAX_LENGTH = 100
DELIVERY_ADDRESS_MAX_LENGTH = 200


def _require_positive_int(value: object, field: str) -> None:
    # bool is an int subclass; True would otherwise pass as 1.
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{field} must be an integer, got {type(value).__name__}"
        raise InvalidArgument(field, msg)
    if value <= 0:
        msg = f"{field} must be positive, got {value}"
        raise InvalidArgument(field, msg)


def _require_text(value: object, field: str, max_length: int) -> str:
    """Validate a bounded non-blank string and return it trimmed.

    The length cap applies to the raw input, before trimming.
    """
    if not isinstance(value, str):
        msg = f"{field} must be a string, got {type(value).__name__}"
        raise InvalidArgument(field, msg)
    if not value.strip():
        msg = f"{field} must not be blank"
        raise InvalidArgument(field, msg)
    if len(value) > max_length:
        msg = f"{field} must be at most {max_length} characters, got {len(value)}"
        raise InvalidArgument(field, msg)
    return value.strip()


@dataclass(frozen=True)
class OrderId:
    """Positive order identifier."""

    value: int

    def __post_init__(self) -> None:
        _require_positive_int(self.value, "order_id")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class CustomerId:
    """Positive customer identifier."""

    value: int

    def __post_init__(self) -> None:
        _require_positive_int(self.value, "customer_id")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ProductId:
    """Positive product identifier."""

    value: int

    def __post_init__(self) -> None:
        _require_positive_int(self.value, "product_id")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class CustomerName:
    """Customer display name, trimmed, at most 100 characters."""

    value: str

    def __post_init__(self) -> None:
        trimmed = _require_text(self.value, "customer_name", CUSTOMER_NAME_MAX_LENGTH)
        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DeliveryAddress:
    """Delivery address, trimmed, at most 200 characters."""

    value: str

    def __post_init__(self) -> None:
        trimmed = _require_text(self.value, "delivery_address", DELIVERY_ADDRESS_MAX_LENGTH)
        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value
