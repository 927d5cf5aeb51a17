"""Tests for Rich renderers."""

from decimal import Decimal
from typing import Any

from orderctl.output.renderers import render_quiet, render_result
from orderctl.services.result import ServiceResult


def _processed(**overrides: Any) -> ServiceResult:
    data: dict[str, Any] = {
        "order_id": 5,
        "customer_id": 7,
        "customer_name": "Alice",
        "delivery_address": "1 Main St",
        "line_items": [
            {"product_id": 1, "price": Decimal("10.5")},
            {"product_id": 2, "price": Decimal("21.0")},
        ],
        "item_count": 2,
        "total": Decimal("31.5"),
        "message": "Order processed successfully",
    }
    data.update(overrides)
    return ServiceResult.success("process_order", data)


class TestProcessOrderRenderer:
    def test_fields_and_total(self) -> None:
        output = render_result(_processed())
        assert output.startswith("OK")
        assert "order_id: 5" in output
        assert "customer_name: Alice" in output
        assert "products: 1, 2" in output
        assert "total: 31.5" in output
        assert "Order processed successfully" in output

    def test_verbose_shows_line_item_table(self) -> None:
        output = render_result(_processed(), verbose=True)
        assert "Product" in output
        assert "Price" in output
        assert "21.0" in output
        assert "products:" not in output

    def test_markup_in_names_is_literal(self) -> None:
        output = render_result(_processed(customer_name="[bold]Eve[/bold]"))
        assert "[bold]Eve[/bold]" in output


class TestOrderInfoRenderer:
    def test_info_line(self) -> None:
        result = ServiceResult.success("order_info", {"order_id": 5, "info": "Order 5 info"})
        output = render_result(result)
        assert "order_id: 5" in output
        assert "Order 5 info" in output


class TestErrorRenderer:
    def test_error_line(self) -> None:
        result = ServiceResult.failure(
            "process_order", "DUPLICATE_PRODUCT", "Duplicate product in order: 4"
        )
        output = render_result(result)
        assert output.startswith("ERROR")
        assert "Duplicate product in order: 4" in output
        assert "code: DUPLICATE_PRODUCT" in output
        assert "detail" not in output

    def test_verbose_shows_detail(self) -> None:
        result = ServiceResult.failure(
            "process_order", "DUPLICATE_PRODUCT", "dup", {"product_id": "4"}
        )
        output = render_result(result, verbose=True)
        assert "detail:" in output
        assert "product_id: 4" in output


class TestGenericRenderer:
    def test_unknown_op_lists_data(self) -> None:
        result = ServiceResult.success("custom", {"alpha": 1, "items": [1, 2]})
        output = render_result(result)
        assert "alpha: 1" in output
        assert "items: [1,2]" in output


class TestRenderQuiet:
    def test_success(self) -> None:
        assert render_quiet(_processed()) == "OK: process_order"

    def test_error_without_payload(self) -> None:
        result = ServiceResult(ok=False, op="order_info")
        assert render_quiet(result) == "ERROR: order_info - Unknown error"
