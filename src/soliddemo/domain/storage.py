"""Dependency inversion: DataManager depends on Storage, not on a backend.

The backend is injected once at construction. Swapping Database for
Filesystem changes where data goes without touching DataManager.

INVARIANT: A DataManager is bound to exactly one backend for its lifetime.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from soliddemo.domain.types import DEFAULT_ECHO, Echo

logger = logging.getLogger(__name__)


class Storage(ABC):
    """Something data can be saved to."""

    @abstractmethod
    def save(self, data: str) -> None:
        """Persist *data* (here: announce where it would go)."""
        ...


class _EchoStorage(Storage):
    target: str = ""

    def __init__(self, echo: Echo = DEFAULT_ECHO) -> None:
        self._echo = echo

    def save(self, data: str) -> None:
        self._echo(f"Saving data to the {self.target}: {data}")


class Database(_EchoStorage):
    target = "database"


class Filesystem(_EchoStorage):
    target = "filesystem"


class DataManager:
    """Forwards every save to the one backend it was built with."""

    def __init__(self, storage: Storage) -> None:
        if storage is None:
            raise TypeError("DataManager requires a storage backend, got None")
        self._storage = storage

    @property
    def storage(self) -> Storage:
        return self._storage

    def save_data(self, data: str) -> None:
        logger.debug("Forwarding save to %s", type(self._storage).__name__)
        self._storage.save(data)
