"""Unit price policy.

Whether a zero unit price is a free item or bad data depends on the pricing
source, so it is a policy choice. Negative prices are always rejected.
"""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum

from orderctl.domain.errors import InvalidPrice
from orderctl.domain.values import ProductId


class ZeroPricePolicy(StrEnum):
    """How a unit price of exactly zero is treated."""

    REJECT = "reject"
    ALLOW = "allow"


def to_decimal(price: Decimal | int | float | str) -> Decimal:
    """Coerce a collaborator price to Decimal.

    Floats go through ``str`` so ``10.5`` stays ``Decimal("10.5")``.
    """
    if isinstance(price, Decimal):
        return price
    return Decimal(str(price))


def check_unit_price(
    product_id: ProductId,
    price: Decimal,
    policy: ZeroPricePolicy = ZeroPricePolicy.REJECT,
) -> Decimal:
    """Return *price* if acceptable under *policy*, else raise InvalidPrice."""
    if not price.is_finite() or price < 0:
        raise InvalidPrice(product_id, price)
    if price == 0 and policy is ZeroPricePolicy.REJECT:
        raise InvalidPrice(product_id, price)
    return price
