"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from soliddemo.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="print_book", data={"title": "Clean Code"})
        assert result.ok is True
        assert result.op == "print_book"
        assert result.data == {"title": "Clean Code"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="UNKNOWN_VARIANT", message="nope")
        result = ServiceResult(ok=False, op="apply_discount", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "UNKNOWN_VARIANT"

    def test_lines_property(self) -> None:
        result = ServiceResult(ok=True, op="run_device", data={"lines": ["a", "b"]})
        assert result.lines == ["a", "b"]
        assert ServiceResult(ok=True, op="x").lines == []

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="test", data={"key": "value"}, meta={"n": 1})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["key"] == "value"
        assert parsed["meta"]["n"] == 1

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_detail_defaults_empty(self) -> None:
        assert ServiceError(code="E", message="m").detail == {}
