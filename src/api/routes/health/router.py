"""Endpoints de health check para Cloud Run."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.bootstrap import collect_settings_errors

router = APIRouter()

SERVICE_NAME = "firestore-webhook-connector"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


class ReadinessResponse(BaseModel):
    """Resposta do readiness check (configuração de entrega)."""

    status: Literal["ready", "not_ready"]
    errors: list[str]
    timestamp: str


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
    """Readiness probe — settings de webhook e gatilhos válidas.

    Não chama o destino: uma checagem ativa geraria entregas falsas.
    """
    errors = collect_settings_errors()
    payload = ReadinessResponse(
        status="not_ready" if errors else "ready",
        errors=errors,
        timestamp=datetime.now(UTC).isoformat(),
    )
    return JSONResponse(
        content=payload.model_dump(),
        status_code=503 if errors else 200,
    )
