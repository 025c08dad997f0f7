"""Variant enums and the line-sink type shared by the demonstrations.

Each enum is a closed set naming the interchangeable variants of one
capability. The enums exist for the CLI and config boundary only; domain
classes are always constructed directly.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum

Echo = Callable[[str], None]

DEFAULT_ECHO: Echo = print


class DiscountKind(StrEnum):
    """Discount strategies."""

    REGULAR = "regular"
    HOLIDAY = "holiday"


class ShapeKind(StrEnum):
    """Shapes with a computable area."""

    SQUARE = "square"
    CIRCLE = "circle"


class StorageKind(StrEnum):
    """Storage backends a DataManager can be bound to."""

    DATABASE = "database"
    FILESYSTEM = "filesystem"
