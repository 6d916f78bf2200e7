"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from ptcal.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="render_month", data={"lines": ["Maio 2024"]})
        assert result.ok is True
        assert result.op == "render_month"
        assert result.data == {"lines": ["Maio 2024"]}
        assert result.error is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="INVALID_YEAR", message="Cal: 0: ano invalido.")
        result = ServiceResult(ok=False, op="render_year", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_YEAR"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="render_month", data={"mode": "month"})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["mode"] == "month"
        assert parsed["error"] is None

    def test_json_carries_only_populated_fields(self) -> None:
        result = ServiceResult(ok=True, op="render_year", data={"mode": "year"})
        assert set(json.loads(result.model_dump_json())) == {"ok", "op", "data", "error"}

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]
