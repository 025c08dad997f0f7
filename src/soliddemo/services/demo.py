"""DemoService — runs each SOLID demonstration and reports what it printed.

Every method builds the domain objects for one principle, points their
output at a :class:`LineCollector`, and returns the collected lines in
``ServiceResult.data["lines"]`` together with the computed values.
Arguments left as None fall back to the loaded settings.
"""

from __future__ import annotations

import logging
from typing import Any

from soliddemo.domain.books import BookPrint
from soliddemo.domain.devices import MyMultiFunctionDevice
from soliddemo.domain.discounts import Discount, HolidayDiscount, RegularDiscount, format_discount
from soliddemo.domain.shapes import Circle, Square, format_area
from soliddemo.domain.storage import Database, DataManager, Filesystem, Storage
from soliddemo.domain.types import DiscountKind, Echo, StorageKind
from soliddemo.services.base import BaseService, LineCollector
from soliddemo.services.result import ServiceResult

logger = logging.getLogger(__name__)


def make_discount(kind: DiscountKind) -> Discount:
    match kind:
        case DiscountKind.REGULAR:
            return RegularDiscount()
        case DiscountKind.HOLIDAY:
            return HolidayDiscount()


def make_storage(kind: StorageKind, echo: Echo) -> Storage:
    match kind:
        case StorageKind.DATABASE:
            return Database(echo)
        case StorageKind.FILESYSTEM:
            return Filesystem(echo)


class DemoService(BaseService):
    """One method per principle, plus :meth:`run_all`."""

    # ── Single responsibility ─────────────────────────────────────────

    def print_book(self, title: str | None = None, author: str | None = None) -> ServiceResult:
        op = "print_book"
        cfg = self._settings.book
        book = BookPrint(
            title=cfg.title if title is None else title,
            author=cfg.author if author is None else author,
        )
        out = LineCollector()
        book.print_details(out)
        logger.debug("Printed book %r", book.title)
        return ServiceResult(
            ok=True,
            op=op,
            data={"title": book.title, "author": book.author, "lines": out.lines},
        )

    # ── Open/closed ───────────────────────────────────────────────────

    def apply_discount(self, price: float | None = None, kind: str | None = None) -> ServiceResult:
        op = "apply_discount"
        cfg = self._settings.discount
        raw_kind = cfg.kind if kind is None else kind
        if raw_kind not in set(DiscountKind):
            return self._unknown_variant(op, raw_kind, DiscountKind)
        discount_kind = DiscountKind(raw_kind)
        amount = cfg.price if price is None else price

        discount = make_discount(discount_kind)
        line = format_discount(amount, discount)
        logger.debug("Applied %s discount to %s", discount_kind, amount)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "kind": discount_kind.value,
                "price": amount,
                "discounted": discount.apply_discount(amount),
                "lines": [line],
            },
        )

    # ── Liskov substitution ───────────────────────────────────────────

    def compute_areas(
        self,
        width: float | None = None,
        radius: float | None = None,
    ) -> ServiceResult:
        op = "compute_areas"
        cfg = self._settings.shapes
        square = Square(cfg.square_width if width is None else width)
        circle = Circle(cfg.circle_radius if radius is None else radius)
        logger.debug("Computing areas for width=%s radius=%s", square.width, circle.radius)
        data: dict[str, Any] = {f"{shape.kind}_area": shape.area() for shape in (square, circle)}
        data["lines"] = [format_area(shape) for shape in (square, circle)]
        return ServiceResult(ok=True, op=op, data=data)

    # ── Interface segregation ─────────────────────────────────────────

    def run_device(self) -> ServiceResult:
        op = "run_device"
        out = LineCollector()
        device = MyMultiFunctionDevice(echo=out)
        device.print()
        device.scan()
        logger.debug(
            "Ran device via %s and %s",
            type(device.printer).__name__,
            type(device.scanner).__name__,
        )
        return ServiceResult(ok=True, op=op, data={"lines": out.lines})

    # ── Dependency inversion ──────────────────────────────────────────

    def save_data(self, kind: str | None = None, data: str | None = None) -> ServiceResult:
        """Save through a DataManager bound to one backend.

        With no *kind*, saves the configured payloads through a database
        manager and then a filesystem manager.
        """
        op = "save_data"
        cfg = self._settings.storage
        if kind is None:
            jobs = [
                (StorageKind.DATABASE, cfg.database_payload if data is None else data),
                (StorageKind.FILESYSTEM, cfg.filesystem_payload if data is None else data),
            ]
        elif kind in set(StorageKind):
            storage_kind = StorageKind(kind)
            default = (
                cfg.database_payload
                if storage_kind is StorageKind.DATABASE
                else cfg.filesystem_payload
            )
            jobs = [(storage_kind, default if data is None else data)]
        else:
            return self._unknown_variant(op, kind, StorageKind)

        out = LineCollector()
        saves: list[dict[str, Any]] = []
        for storage_kind, payload in jobs:
            manager = DataManager(make_storage(storage_kind, out))
            manager.save_data(payload)
            saves.append({"backend": storage_kind.value, "data": payload})
            logger.debug("Saved %d chars via %s", len(payload), storage_kind)
        return ServiceResult(ok=True, op=op, data={"saves": saves, "lines": out.lines})

    # ── Everything ────────────────────────────────────────────────────

    def run_all(self) -> ServiceResult:
        """Run all five demonstrations in order.

        Stops at the first failing demonstration and returns its error.
        """
        op = "run_all"
        sections: dict[str, list[str]] = {}
        lines: list[str] = []
        for step in (
            self.print_book,
            self.apply_discount,
            self.compute_areas,
            self.run_device,
            self.save_data,
        ):
            result = step()
            if not result.ok:
                return ServiceResult(ok=False, op=op, error=result.error)
            sections[result.op] = result.lines
            lines.extend(result.lines)
        return ServiceResult(ok=True, op=op, data={"sections": sections, "lines": lines})
