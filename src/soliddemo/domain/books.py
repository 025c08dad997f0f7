"""Single responsibility: a book record that only knows how to print itself."""

from __future__ import annotations

from dataclasses import dataclass

from soliddemo.domain.types import DEFAULT_ECHO, Echo


@dataclass(frozen=True)
class BookPrint:
    """Title and author, kept verbatim."""

    title: str
    author: str

    def details(self) -> str:
        return f"Title: {self.title}, Author: {self.author}"

    def print_details(self, echo: Echo = DEFAULT_ECHO) -> None:
        echo(self.details())
