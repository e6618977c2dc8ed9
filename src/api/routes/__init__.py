"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Receber CloudEvents dos gatilhos Firestore
- Extrair metadados (headers ce-*) e corpo JSON
- Delegar para o use case e responder sempre 200
- Health e readiness para o Cloud Run

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
