"""Interface segregation: printing and scanning are separate capabilities.

A client that only prints depends on :class:`Printer` alone. A device that
does both satisfies :class:`MultiFunctionDevice` by composing one
implementation of each, with no logic of its own.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from soliddemo.domain.types import DEFAULT_ECHO, Echo


class Printer(ABC):
    @abstractmethod
    def print(self) -> None: ...


class Scanner(ABC):
    @abstractmethod
    def scan(self) -> None: ...


class MultiFunctionDevice(Printer, Scanner):
    """Union of :class:`Printer` and :class:`Scanner`."""


class MyPrinter(Printer):
    def __init__(self, echo: Echo = DEFAULT_ECHO) -> None:
        self._echo = echo

    def print(self) -> None:
        self._echo("Printing...")


class MyScanner(Scanner):
    def __init__(self, echo: Echo = DEFAULT_ECHO) -> None:
        self._echo = echo

    def scan(self) -> None:
        self._echo("Scanning...")


class MyMultiFunctionDevice(MultiFunctionDevice):
    """Explicit composition of one printer and one scanner.

    Each capability method forwards to its own component; neither method
    knows about the other.
    """

    def __init__(
        self,
        printer: Printer | None = None,
        scanner: Scanner | None = None,
        *,
        echo: Echo = DEFAULT_ECHO,
    ) -> None:
        self.printer = printer if printer is not None else MyPrinter(echo)
        self.scanner = scanner if scanner is not None else MyScanner(echo)

    def print(self) -> None:
        self.printer.print()

    def scan(self) -> None:
        self.scanner.scan()
