"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, soliddemo.toml only contains
overrides. With no file at all the demo prints its classic output.
"""

from __future__ import annotations

from pydantic import BaseModel

from soliddemo.domain.types import DiscountKind

# --- soliddemo.toml sections ---


class BookConfig(BaseModel):
    """[book] section."""

    model_config = {"frozen": True}

    title: str = "Clean Code"
    author: str = "Robert C. Martin"


class DiscountConfig(BaseModel):
    """[discount] section.

    ``kind`` stays a plain string so a bad value is reported by the
    service as a structured error instead of a validation traceback.
    """

    model_config = {"frozen": True}

    price: float = 100.0
    kind: str = DiscountKind.REGULAR.value


class ShapesConfig(BaseModel):
    """[shapes] section."""

    model_config = {"frozen": True}

    square_width: float = 5.0
    circle_radius: float = 3.0


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    database_payload: str = "Data to save with Database storage"
    filesystem_payload: str = "Data to save with Filesystem storage"

