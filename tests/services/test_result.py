"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from bitsctl.domain.errors import FramingMismatch
from bitsctl.infrastructure.source import InputUnavailable
from bitsctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="evaluate", data={"value": 3})
        assert result.ok is True
        assert result.data == {"value": 3}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="evaluate", data={"value": 54}, meta={"k": 1})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["value"] == 54
        assert parsed["meta"]["k"] == 1

    def test_large_values_survive_json(self) -> None:
        value = (1 << 64) - 1
        result = ServiceResult(ok=True, op="evaluate", data={"value": value})
        assert json.loads(result.model_dump_json())["data"]["value"] == value

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="evaluate")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestFailure:
    def test_from_domain_error(self) -> None:
        exc = FramingMismatch("Children declared 10 bits but consumed 11", declared=10, consumed=11)
        result = ServiceResult.failure("decode", exc)
        assert result.ok is False
        assert result.op == "decode"
        assert result.error == ServiceError(
            code="FRAMING_MISMATCH",
            message="Children declared 10 bits but consumed 11",
            detail={"declared": 10, "consumed": 11},
        )

    def test_from_input_error(self) -> None:
        result = ServiceResult.failure("evaluate", InputUnavailable("No input", path="x"))
        assert result.error is not None
        assert result.error.code == "NO_INPUT"
        assert result.error.detail == {"path": "x"}


class TestServiceError:
    def test_default_detail(self) -> None:
        error = ServiceError(code="E001", message="bad")
        assert error.detail == {}
