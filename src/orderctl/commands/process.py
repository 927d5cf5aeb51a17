"""Command: validate, price, and save an order."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from orderctl.commands._base import OrderCommand

if TYPE_CHECKING:
    from orderctl.commands._context import AppContext


@click.command(
    cls=OrderCommand,
    examples="""\
  orderctl process 5 --customer-id 7 --name Alice --address "1 Main St" -p 1 -p 2 -p 3
  orderctl --json process 5 --customer-id 7 --name Alice --address "1 Main St" -p 4
  orderctl process 9 --customer-id 2 --name Bob --address "2 Side Rd" -p 1 --allow-zero-price""",
)
@click.argument("order_id", type=int)
@click.option("--customer-id", "customer_id", type=int, required=True, help="Customer ID.")
@click.option("--name", "customer_name", required=True, help="Customer name.")
@click.option("--address", required=True, help="Delivery address.")
@click.option(
    "-p",
    "--product",
    "product_ids",
    type=int,
    multiple=True,
    help="Product ID (repeatable, order preserved).",
)
@click.option(
    "--allow-zero-price",
    is_flag=True,
    help="Accept products priced at zero for this run.",
)
@click.pass_obj
def process(
    app: AppContext,
    order_id: int,
    customer_id: int,
    customer_name: str,
    address: str,
    product_ids: tuple[int, ...],
    allow_zero_price: bool,
) -> None:
    """Validate an order, price its products, and save it."""
    from orderctl.services.factory import create_processor
    from orderctl.services.orders import OrderService

    if allow_zero_price:
        from orderctl.domain.pricing import ZeroPricePolicy

        pricing = app.settings.pricing.model_copy(update={"zero_price": ZeroPricePolicy.ALLOW})
        svc = OrderService(create_processor(app.settings.model_copy(update={"pricing": pricing})))
    else:
        svc = app.service

    app.emit(
        svc.process_order(
            order_id,
            list(product_ids),
            customer_id,
            customer_name,
            address,
        )
    )
