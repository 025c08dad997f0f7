"""Command: Liskov substitution demonstration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from soliddemo.commands._base import DemoCommand

if TYPE_CHECKING:
    from soliddemo.commands._context import AppContext


@click.command(
    cls=DemoCommand,
    examples="""\
  soliddemo shapes
  soliddemo shapes --width 2 --radius 1.5""",
)
@click.option("--width", type=float, default=None, help="Square side length.")
@click.option("--radius", type=float, default=None, help="Circle radius.")
@click.pass_obj
def shapes(app: AppContext, width: float | None, radius: float | None) -> None:
    """Compute the area of a square and a circle (Liskov substitution)."""
    app.emit(app.demo.compute_areas(width=width, radius=radius))
