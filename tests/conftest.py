"""Shared pytest fixtures and test helpers for orderctl tests."""

from __future__ import annotations

from collections.abc import Generator
from decimal import Decimal
from pathlib import Path

import pytest
from click.testing import CliRunner

from orderctl.domain.order import OrderDetails
from orderctl.domain.values import OrderId, ProductId
from orderctl.infrastructure.pricing import FixedRatePricing
from orderctl.infrastructure.storage import InMemoryOrderStorage
from orderctl.services.orders import OrderService
from orderctl.services.processor import OrderProcessor


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def storage() -> InMemoryOrderStorage:
    return InMemoryOrderStorage()


@pytest.fixture
def processor(storage: InMemoryOrderStorage) -> OrderProcessor:
    """Processor with the placeholder 10.5-per-id pricing and in-memory storage."""
    return OrderProcessor(FixedRatePricing(), storage)


@pytest.fixture
def service(processor: OrderProcessor) -> OrderService:
    return OrderService(processor)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run from an empty temp directory with no config env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` so config
    discovery never picks up a stray orderctl.toml.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ORDERCTL_CONFIG", raising=False)
    yield


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_order(
    product_ids: list[int] | tuple[int, ...] = (1, 2, 3),
    *,
    order_id: int = 5,
    customer_id: int = 7,
    customer_name: str = "Alice",
    delivery_address: str = "1 Main St",
) -> OrderDetails:
    """Build a valid OrderDetails, defaulting to the reference example."""
    return OrderDetails.from_raw(
        order_id=order_id,
        customer_id=customer_id,
        customer_name=customer_name,
        delivery_address=delivery_address,
        product_ids=product_ids,
    )


class RecordingPricing:
    """Pricing stub returning fixed prices and recording each lookup."""

    def __init__(self, prices: dict[int, Decimal | int | float | str]) -> None:
        self.prices = prices
        self.calls: list[ProductId] = []

    def get_price(self, product_id: ProductId) -> Decimal:
        self.calls.append(product_id)
        return self.prices[product_id.value]  # type: ignore[return-value]


class ExplodingStorage:
    """Storage stub whose save always fails with *error*."""

    def __init__(self, error: Exception) -> None:
        self.error = error

    def save(self, order_id: OrderId, customer_id: object, total: Decimal) -> None:
        raise self.error

    def get_info(self, order_id: OrderId) -> str:
        raise self.error
