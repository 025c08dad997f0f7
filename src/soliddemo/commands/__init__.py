"""Subcommand modules for soliddemo."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register one command per demonstration, plus ``run`` for all of them."""
    from soliddemo.commands.book import book
    from soliddemo.commands.device import device
    from soliddemo.commands.discount import discount
    from soliddemo.commands.run import run
    from soliddemo.commands.shapes import shapes
    from soliddemo.commands.storage import storage

    cli.add_command(run)
    cli.add_command(book)
    cli.add_command(discount)
    cli.add_command(shapes)
    cli.add_command(device)
    cli.add_command(storage)
