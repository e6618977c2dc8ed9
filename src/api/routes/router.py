"""Agregador de rotas — registra todos os routers.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.firestore.router import router as firestore_router
from api.routes.health.router import router as health_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    # Gatilhos Firestore (destinos dos triggers Eventarc)
    api_router.include_router(
        firestore_router,
        prefix="/events/firestore",
        tags=["firestore"],
    )

    return api_router
