"""Testes da validação de settings no startup."""

from __future__ import annotations

import logging

import pytest

from app.bootstrap import validate_runtime_settings


def test_missing_api_key_only_warns(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.delenv("CALCOM_API_KEY", raising=False)

    with caplog.at_level(logging.WARNING, logger="app.bootstrap"):
        validate_runtime_settings()

    assert any(record.getMessage() == "calcom_api_key_missing" for record in caplog.records)


def test_structural_error_fails_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("CALCOM_API_KEY", "cal_live_123")
    monkeypatch.setenv("CALCOM_REQUEST_TIMEOUT_SECONDS", "0")

    with pytest.raises(RuntimeError, match="CALCOM_REQUEST_TIMEOUT_SECONDS"):
        validate_runtime_settings()


def test_structural_error_is_tolerated_in_development(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("CALCOM_API_KEY", "cal_live_123")
    monkeypatch.setenv("CALCOM_REQUEST_TIMEOUT_SECONDS", "0")

    validate_runtime_settings()
