"""Open/closed: discount strategies behind one abstract contract.

New discounts are added as new subclasses of :class:`Discount`; callers
that only depend on ``apply_discount`` never change.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

REGULAR_RATE = 0.9
HOLIDAY_RATE = 0.8


class Discount(ABC):
    """A price transform."""

    @abstractmethod
    def apply_discount(self, price: float) -> float:
        """Return the discounted *price*."""
        ...


class RegularDiscount(Discount):
    """Ten percent off."""

    def apply_discount(self, price: float) -> float:
        return price * REGULAR_RATE


class HolidayDiscount(Discount):
    """Twenty percent off."""

    def apply_discount(self, price: float) -> float:
        return price * HOLIDAY_RATE


def format_discount(price: float, discount: Discount) -> str:
    """Render the original and discounted price on one line."""
    discounted = discount.apply_discount(price)
    return f"Regular Price: ${price:.2f}, Discounted Price: ${discounted:.2f}"
