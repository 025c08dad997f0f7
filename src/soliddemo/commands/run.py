"""Command: run every demonstration in order."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from soliddemo.commands._base import DemoCommand

if TYPE_CHECKING:
    from soliddemo.commands._context import AppContext


@click.command(
    cls=DemoCommand,
    examples="""\
  soliddemo run
  soliddemo --json run
  soliddemo -c classroom.toml run""",
)
@click.pass_obj
def run(app: AppContext) -> None:
    """Run all five SOLID demonstrations."""
    app.emit(app.demo.run_all())
