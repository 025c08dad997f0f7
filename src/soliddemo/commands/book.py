"""Command: single responsibility demonstration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from soliddemo.commands._base import DemoCommand

if TYPE_CHECKING:
    from soliddemo.commands._context import AppContext


@click.command(
    cls=DemoCommand,
    examples="""\
  soliddemo book
  soliddemo book --title Refactoring --author 'Martin Fowler'""",
)
@click.option("--title", default=None, help="Book title (default from config).")
@click.option("--author", default=None, help="Book author (default from config).")
@click.pass_obj
def book(app: AppContext, title: str | None, author: str | None) -> None:
    """Print a book record (single responsibility)."""
    app.emit(app.demo.print_book(title=title, author=author))
