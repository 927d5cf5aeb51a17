"""Command: show stored information for an order."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from orderctl.commands._base import OrderCommand

if TYPE_CHECKING:
    from orderctl.commands._context import AppContext


@click.command(
    cls=OrderCommand,
    examples="""\
  orderctl info 5
  orderctl --json info 5""",
)
@click.argument("order_id", type=int)
@click.pass_obj
def info(app: AppContext, order_id: int) -> None:
    """Show what storage knows about an order."""
    app.emit(app.service.order_info(order_id))
