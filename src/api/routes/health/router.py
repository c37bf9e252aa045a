"""Endpoints de health check (liveness/readiness)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_calcom_settings

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "calcom-booking-bridge"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness probe — pronto quando a credencial do Cal.com existe."""
    calcom_check = _check_calcom_credentials()
    ready = calcom_check.status == "ok"

    if not ready:
        logger.warning("readiness_calcom_not_configured", extra={"error": calcom_check.error})

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {"calcom": calcom_check.as_dict()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_calcom_credentials() -> DependencyCheck:
    settings = get_calcom_settings()
    if not settings.has_api_key:
        return DependencyCheck(status="failed", error="api_key_not_configured")
    return DependencyCheck(status="ok")
