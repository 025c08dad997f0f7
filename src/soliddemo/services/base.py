"""BaseService — shared foundation for soliddemo services."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from soliddemo.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from soliddemo.config.settings import DemoSettings

logger = logging.getLogger(__name__)


class LineCollector:
    """Line sink that records everything a demonstration writes.

    Passed wherever the domain accepts an ``echo`` callable.
    """

    def __init__(self) -> None:
        self.lines: list[str] = []

    def __call__(self, line: str) -> None:
        self.lines.append(line)


class BaseService:
    """Base for service-layer classes.

    Every service receives the settings at construction time and reads
    its defaults from them.
    """

    def __init__(self, settings: DemoSettings) -> None:
        self._settings = settings

    @staticmethod
    def _unknown_variant(op: str, kind: str, choices: Iterable[str]) -> ServiceResult:
        allowed = sorted(str(choice) for choice in choices)
        logger.warning("Unknown variant %r for %s", kind, op)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code="UNKNOWN_VARIANT",
                message=f"Unknown variant '{kind}' (expected one of: {', '.join(allowed)})",
                detail={"kind": kind, "choices": allowed},
            ),
        )
