"""Command: dependency inversion demonstration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from soliddemo.commands._base import DemoCommand
from soliddemo.domain.types import StorageKind

if TYPE_CHECKING:
    from soliddemo.commands._context import AppContext


@click.command(
    cls=DemoCommand,
    examples="""\
  soliddemo storage
  soliddemo storage --backend filesystem --data X
  soliddemo --json storage --backend database""",
)
@click.option(
    "--backend",
    type=click.Choice([k.value for k in StorageKind]),
    default=None,
    help="Bind the manager to one backend (default: both, in turn).",
)
@click.option("--data", default=None, help="Payload to save.")
@click.pass_obj
def storage(app: AppContext, backend: str | None, data: str | None) -> None:
    """Save data through an injected storage backend (dependency inversion)."""
    app.emit(app.demo.save_data(kind=backend, data=data))
