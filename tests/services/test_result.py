"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from passforge.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="generate_password", data={"password": "abc"})
        assert result.ok is True
        assert result.op == "generate_password"
        assert result.data == {"password": "abc"}
        assert result.warnings == []
        assert result.error is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="E001", message="Not found")
        result = ServiceResult(ok=False, op="get", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "E001"

    def test_failure_shorthand(self) -> None:
        result = ServiceResult.failure("theme_set", "INVALID_THEME", "bad", value="blue")
        assert result.ok is False
        assert result.op == "theme_set"
        assert result.error == ServiceError(
            code="INVALID_THEME", message="bad", detail={"value": "blue"}
        )

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="test", data={"key": "value"}, warnings=["w"])
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["key"] == "value"
        assert parsed["warnings"] == ["w"]
        assert "meta" not in parsed

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]
