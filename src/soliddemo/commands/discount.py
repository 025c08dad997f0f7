"""Command: open/closed demonstration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from soliddemo.commands._base import DemoCommand
from soliddemo.domain.types import DiscountKind

if TYPE_CHECKING:
    from soliddemo.commands._context import AppContext


@click.command(
    cls=DemoCommand,
    examples="""\
  soliddemo discount
  soliddemo discount --kind holiday
  soliddemo discount --price 250 --kind regular""",
)
@click.option("--price", type=float, default=None, help="Price before discount.")
@click.option(
    "--kind",
    type=click.Choice([k.value for k in DiscountKind]),
    default=None,
    help="Discount strategy.",
)
@click.pass_obj
def discount(app: AppContext, price: float | None, kind: str | None) -> None:
    """Apply a discount strategy to a price (open/closed)."""
    app.emit(app.demo.apply_discount(price=price, kind=kind))
