"""Order aggregate and processing outcome.

:class:`OrderDetails` is built once per processing request and is never
mutated. Structural checks (empty list, duplicate products) run at
construction, before any collaborator is involved.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from decimal import Decimal

from orderctl.domain.errors import DuplicateProduct, EmptyOrder, InvalidArgument
from orderctl.domain.values import (
    CustomerId,
    CustomerName,
    DeliveryAddress,
    OrderId,
    ProductId,
)

SUCCESS_MESSAGE = "Order processed successfully"


@dataclass(frozen=True)
class OrderDetails:
    """A validated purchase order.

    INVARIANT: ``product_ids`` is non-empty and holds no duplicates.
    """

    order_id: OrderId
    customer_id: CustomerId
    customer_name: CustomerName
    delivery_address: DeliveryAddress
    product_ids: tuple[ProductId, ...]

    def __post_init__(self) -> None:
        product_ids = tuple(self.product_ids)
        for product_id in product_ids:
            if not isinstance(product_id, ProductId):
                msg = f"product_ids must contain ProductId values, got {type(product_id).__name__}"
                raise InvalidArgument("product_ids", msg)
        object.__setattr__(self, "product_ids", product_ids)

        if not product_ids:
            raise EmptyOrder()
        duplicate = _first_duplicate(product_ids)
        if duplicate is not None:
            raise DuplicateProduct(duplicate)

    @classmethod
    def from_raw(
        cls,
        *,
        order_id: int,
        customer_id: int,
        customer_name: str,
        delivery_address: str,
        product_ids: Iterable[int] | None,
    ) -> OrderDetails:
        """Build an order from primitives, failing on the first invalid value.

        Identifiers and text fields are checked before the product list.
        A missing product list is an empty order.
        """
        oid = OrderId(order_id)
        cid = CustomerId(customer_id)
        name = CustomerName(customer_name)
        address = DeliveryAddress(delivery_address)
        if product_ids is None:
            raise EmptyOrder()
        products = tuple(ProductId(pid) for pid in product_ids)
        return cls(
            order_id=oid,
            customer_id=cid,
            customer_name=name,
            delivery_address=address,
            product_ids=products,
        )


def _first_duplicate(product_ids: Sequence[ProductId]) -> ProductId | None:
    seen: set[ProductId] = set()
    for product_id in product_ids:
        if product_id in seen:
            return product_id
        seen.add(product_id)
    return None


@dataclass(frozen=True)
class LineItem:
    """One priced product of an order."""

    product_id: ProductId
    price: Decimal


@dataclass(frozen=True)
class OrderReceipt:
    """Outcome of a successfully processed and persisted order."""

    order_id: OrderId
    customer_id: CustomerId
    total: Decimal
    line_items: tuple[LineItem, ...] = field(default_factory=tuple)
    message: str = SUCCESS_MESSAGE

    def __str__(self) -> str:
        return self.message
