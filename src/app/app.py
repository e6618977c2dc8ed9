"""Entrypoint do conector de webhooks Firestore.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080

Cloud Run:
    Cada trigger Eventarc aponta para /events/firestore/{created,updated,deleted}
    (ou para /events/firestore/, roteado por ce-type).
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer log
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup: valida settings (falha rápido em staging/production).
    """
    logger.info("app_starting")
    validate_runtime_settings()

    yield

    logger.info("app_shutting_down")


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI."""
    fastapi_app = FastAPI(
        title="Firestore Webhook Connector",
        description="Entrega eventos de documento Firestore como webhooks JSON",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured")

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting firestore-webhook-connector in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8080")),
        reload=True,
    )


if __name__ == "__main__":
    main()
