"""Command: interface segregation demonstration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from soliddemo.commands._base import DemoCommand

if TYPE_CHECKING:
    from soliddemo.commands._context import AppContext


@click.command(cls=DemoCommand, examples="  soliddemo device")
@click.pass_obj
def device(app: AppContext) -> None:
    """Print and scan with a multi-function device (interface segregation)."""
    app.emit(app.demo.run_device())
