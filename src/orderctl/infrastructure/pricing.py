"""Pricing collaborators.

The workflow only depends on :class:`PriceLookup`. A lookup either returns
a unit price or raises :class:`PriceUnavailable`; it never signals failure
through a sentinel value.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Protocol

from orderctl.domain.errors import PriceUnavailable
from orderctl.domain.pricing import to_decimal
from orderctl.domain.values import ProductId

logger = logging.getLogger(__name__)

DEFAULT_UNIT_RATE = Decimal("10.5")


class PriceLookup(Protocol):
    """Unit price source consumed by the order workflow."""

    def get_price(self, product_id: ProductId) -> Decimal: ...


class FixedRatePricing:
    """Placeholder pricing: product id times a fixed rate."""

    def __init__(self, rate: Decimal = DEFAULT_UNIT_RATE) -> None:
        self.rate = to_decimal(rate)

    def get_price(self, product_id: ProductId) -> Decimal:
        return product_id.value * self.rate


class CatalogPricing:
    """Price lookup against a fixed product-id → price table."""

    def __init__(self, prices: Mapping[int, Decimal | int | float | str]) -> None:
        self._prices = {int(pid): to_decimal(price) for pid, price in prices.items()}

    def get_price(self, product_id: ProductId) -> Decimal:
        try:
            return self._prices[product_id.value]
        except KeyError:
            logger.debug("No catalog price for product %s", product_id)
            raise PriceUnavailable(product_id) from None
