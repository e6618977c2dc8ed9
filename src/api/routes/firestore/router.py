"""Router Firestore — agrega os endpoints de gatilho."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.firestore.triggers import router as triggers_router

router = APIRouter()

router.include_router(triggers_router)
