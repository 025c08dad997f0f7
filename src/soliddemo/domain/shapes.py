"""Liskov substitution: any Shape can stand in for another.

Both variants are pure functions of their single dimension, so replacing
a Square with a Circle behind :class:`Shape` changes the number, never
the caller's behavior.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from soliddemo.domain.types import ShapeKind

# Three-decimal pi; Circle(3) must render as 28.26.
PI_APPROX = 3.14


class Shape(ABC):
    """Anything with an area."""

    kind: ClassVar[ShapeKind]

    @abstractmethod
    def area(self) -> float:
        """Return the area of the shape."""
        ...


@dataclass(frozen=True)
class Square(Shape):
    kind: ClassVar[ShapeKind] = ShapeKind.SQUARE

    width: float

    def area(self) -> float:
        return self.width * self.width


@dataclass(frozen=True)
class Circle(Shape):
    kind: ClassVar[ShapeKind] = ShapeKind.CIRCLE

    radius: float

    def area(self) -> float:
        return PI_APPROX * self.radius * self.radius


def format_area(shape: Shape) -> str:
    return f"{shape.kind.capitalize()} Area: {shape.area():.2f}"
