"""Tests for domain variant enums — parametrized."""

import pytest

from soliddemo.domain.types import DiscountKind, ShapeKind, StorageKind

ENUM_CASES = [
    (DiscountKind, {"regular", "holiday"}),
    (ShapeKind, {"square", "circle"}),
    (StorageKind, {"database", "filesystem"}),
]


@pytest.mark.parametrize(
    "enum_cls,expected_values",
    ENUM_CASES,
    ids=[cls.__name__ for cls, _ in ENUM_CASES],
)
def test_enum_members_and_values(enum_cls: type, expected_values: set[str]) -> None:
    """Each StrEnum is a closed set whose members equal their string value."""
    actual_values = {e.value for e in enum_cls}
    assert actual_values == expected_values
    for member in enum_cls:
        assert member == member.value
        assert isinstance(member, str)
