"""Tests for OrderProcessor — pricing, totals, persistence, error wrapping."""

from __future__ import annotations

from decimal import Decimal

import pytest

from orderctl.domain.errors import (
    DuplicateProduct,
    EmptyOrder,
    InvalidArgument,
    InvalidPrice,
    OrderProcessingFailure,
    PriceUnavailable,
)
from orderctl.domain.pricing import ZeroPricePolicy
from orderctl.domain.values import CustomerId, OrderId, ProductId
from orderctl.infrastructure.pricing import CatalogPricing
from orderctl.infrastructure.storage import InMemoryOrderStorage, SavedOrder
from orderctl.services.processor import OrderProcessor
from tests.conftest import ExplodingStorage, RecordingPricing, make_order

# ---------------------------------------------------------------------------
# process_order() — happy path
# ---------------------------------------------------------------------------


class TestProcessOrder:
    def test_reference_example(
        self, processor: OrderProcessor, storage: InMemoryOrderStorage
    ) -> None:
        """Order 5, customer 7, products [1,2,3] at 10.5 per id → 63.0."""
        receipt = processor.process_order(make_order([1, 2, 3]))

        assert receipt.total == Decimal("63.0")
        assert str(receipt) == "Order processed successfully"
        assert storage.saved == [SavedOrder(OrderId(5), CustomerId(7), Decimal("63.0"))]

    def test_line_items_in_order(self, processor: OrderProcessor) -> None:
        receipt = processor.process_order(make_order([3, 1]))
        assert [(i.product_id.value, i.price) for i in receipt.line_items] == [
            (3, Decimal("31.5")),
            (1, Decimal("10.5")),
        ]

    def test_prices_requested_in_order(self, storage: InMemoryOrderStorage) -> None:
        pricing = RecordingPricing({2: "1", 9: "2", 4: "3"})
        OrderProcessor(pricing, storage).process_order(make_order([9, 2, 4]))
        assert pricing.calls == [ProductId(9), ProductId(2), ProductId(4)]

    def test_decimal_sum_is_exact(self, storage: InMemoryOrderStorage) -> None:
        pricing = RecordingPricing({1: 0.1, 2: 0.2})
        receipt = OrderProcessor(pricing, storage).process_order(make_order([1, 2]))
        assert receipt.total == Decimal("0.3")

    def test_no_rounding_beyond_collaborator_precision(
        self, storage: InMemoryOrderStorage
    ) -> None:
        pricing = RecordingPricing({1: Decimal("1.005"), 2: Decimal("2.0001")})
        receipt = OrderProcessor(pricing, storage).process_order(make_order([1, 2]))
        assert receipt.total == Decimal("3.0051")

    def test_single_product(self, processor: OrderProcessor) -> None:
        receipt = processor.process_order(make_order([2]))
        assert receipt.total == Decimal("21.0")


class TestGetOrderInformation:
    def test_delegates_to_storage(
        self, processor: OrderProcessor, storage: InMemoryOrderStorage
    ) -> None:
        processor.process_order(make_order([1]))
        assert processor.get_order_information(OrderId(5)) == (
            "Order 5 for customer 7 with total 10.5"
        )

    def test_unknown_order(self, processor: OrderProcessor) -> None:
        assert processor.get_order_information(OrderId(8)) == "Order 8 has not been saved"

    def test_storage_error_wrapped(self) -> None:
        cause = ConnectionError("storage offline")
        processor = OrderProcessor(RecordingPricing({}), ExplodingStorage(cause))
        with pytest.raises(OrderProcessingFailure) as exc_info:
            processor.get_order_information(OrderId(5))
        assert exc_info.value.order_id == OrderId(5)
        assert exc_info.value.__cause__ is cause

    def test_domain_error_from_storage_not_wrapped(self) -> None:
        error = InvalidArgument("order_id", "unknown to storage")
        processor = OrderProcessor(RecordingPricing({}), ExplodingStorage(error))
        with pytest.raises(InvalidArgument) as exc_info:
            processor.get_order_information(OrderId(5))
        assert exc_info.value is error


# ---------------------------------------------------------------------------
# Price validation
# ---------------------------------------------------------------------------


class TestPriceValidation:
    def test_negative_price_fails_naming_product(self, storage: InMemoryOrderStorage) -> None:
        pricing = RecordingPricing({1: "5", 2: "-1", 3: "5"})
        with pytest.raises(InvalidPrice) as exc_info:
            OrderProcessor(pricing, storage).process_order(make_order([1, 2, 3]))
        assert exc_info.value.product_id == ProductId(2)
        assert "2" in str(exc_info.value)

    def test_pricing_stops_at_first_invalid_price(self, storage: InMemoryOrderStorage) -> None:
        pricing = RecordingPricing({1: "-1", 2: "5"})
        with pytest.raises(InvalidPrice):
            OrderProcessor(pricing, storage).process_order(make_order([1, 2]))
        assert pricing.calls == [ProductId(1)]

    def test_invalid_price_never_saves(self, storage: InMemoryOrderStorage) -> None:
        pricing = RecordingPricing({1: "5", 2: "-3"})
        with pytest.raises(InvalidPrice):
            OrderProcessor(pricing, storage).process_order(make_order([1, 2]))
        assert storage.saved == []

    def test_zero_price_rejected_by_default(self, storage: InMemoryOrderStorage) -> None:
        pricing = RecordingPricing({1: 0})
        processor = OrderProcessor(pricing, storage)
        assert processor.zero_price is ZeroPricePolicy.REJECT
        with pytest.raises(InvalidPrice):
            processor.process_order(make_order([1]))

    def test_zero_price_allowed_by_policy(self, storage: InMemoryOrderStorage) -> None:
        pricing = RecordingPricing({1: 0, 2: "4.5"})
        processor = OrderProcessor(pricing, storage, zero_price=ZeroPricePolicy.ALLOW)
        receipt = processor.process_order(make_order([1, 2]))
        assert receipt.total == Decimal("4.5")
        assert storage.saved[0].total == Decimal("4.5")

    def test_price_unavailable_propagates_unchanged(
        self, storage: InMemoryOrderStorage
    ) -> None:
        processor = OrderProcessor(CatalogPricing({1: "1"}), storage)
        with pytest.raises(PriceUnavailable) as exc_info:
            processor.process_order(make_order([1, 2]))
        assert exc_info.value.product_id == ProductId(2)
        assert storage.saved == []


# ---------------------------------------------------------------------------
# Collaborator failures
# ---------------------------------------------------------------------------


class TestCollaboratorFailures:
    def test_storage_error_wrapped(self) -> None:
        cause = ConnectionError("storage offline")
        processor = OrderProcessor(RecordingPricing({1: "1"}), ExplodingStorage(cause))
        with pytest.raises(OrderProcessingFailure) as exc_info:
            processor.process_order(make_order([1]))
        assert exc_info.value.order_id == OrderId(5)
        assert exc_info.value.cause is cause
        assert exc_info.value.__cause__ is cause

    def test_pricing_error_wrapped(self, storage: InMemoryOrderStorage) -> None:
        """A KeyError from a misbehaving pricing source is not a domain error."""
        processor = OrderProcessor(RecordingPricing({}), storage)
        with pytest.raises(OrderProcessingFailure) as exc_info:
            processor.process_order(make_order([1]))
        assert isinstance(exc_info.value.cause, KeyError)
        assert storage.saved == []

    def test_non_numeric_price_wrapped(self, storage: InMemoryOrderStorage) -> None:
        processor = OrderProcessor(RecordingPricing({1: "n/a"}), storage)
        with pytest.raises(OrderProcessingFailure):
            processor.process_order(make_order([1]))

    def test_domain_error_from_storage_not_wrapped(self) -> None:
        error = InvalidArgument("order_id", "rejected by storage")
        processor = OrderProcessor(RecordingPricing({1: "1"}), ExplodingStorage(error))
        with pytest.raises(InvalidArgument) as exc_info:
            processor.process_order(make_order([1]))
        assert exc_info.value is error


# ---------------------------------------------------------------------------
# Structural failures happen before any collaborator call
# ---------------------------------------------------------------------------


class TestStructuralValidation:
    def test_empty_order_fails_before_pricing(self) -> None:
        with pytest.raises(EmptyOrder):
            make_order([])

    def test_duplicate_fails_before_storage(self, storage: InMemoryOrderStorage) -> None:
        pricing = RecordingPricing({4: "1"})
        OrderProcessor(pricing, storage)
        with pytest.raises(DuplicateProduct):
            make_order([4, 4])
        assert pricing.calls == []
        assert storage.saved == []
