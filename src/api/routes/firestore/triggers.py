"""Endpoints dos gatilhos de documento Firestore (Eventarc -> Cloud Run).

Endpoints:
- POST /events/firestore/created: gatilho de criação
- POST /events/firestore/updated: gatilho de atualização
- POST /events/firestore/deleted: gatilho de remoção
- POST /events/firestore/: gatilho único, roteado pelo header ce-type

CloudEvents em modo binário: metadados em headers `ce-*`, corpo JSON
com `value`/`oldValue`. Toda requisição responde 200: uma resposta de
erro faria o Eventarc reentregar o evento.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, Request

from app.bootstrap import get_document_event_use_case
from app.observability import reset_correlation_id, set_correlation_id
from app.use_cases.firestore import TriggerContext

logger = logging.getLogger(__name__)

router = APIRouter()

CLOUD_EVENT_TYPE_PREFIX = "google.cloud.firestore.document.v1."
_AUTH_CONTEXT_SUFFIX = ".withAuthContext"
_SUPPORTED_KINDS = ("created", "updated", "deleted")


def resolve_kind_from_event_type(ce_type: str | None) -> str | None:
    """Mapeia `ce-type` para o tipo de evento (created/updated/deleted).

    Aceita as variantes `.withAuthContext`. Tipos desconhecidos -> None.
    """
    if not ce_type or not ce_type.startswith(CLOUD_EVENT_TYPE_PREFIX):
        return None
    kind = ce_type[len(CLOUD_EVENT_TYPE_PREFIX):]
    kind = kind.removesuffix(_AUTH_CONTEXT_SUFFIX)
    return kind if kind in _SUPPORTED_KINDS else None


def _build_trigger_context(request: Request) -> TriggerContext:
    headers = request.headers
    return TriggerContext(
        event_id=headers.get("ce-id"),
        event_time=headers.get("ce-time"),
        subject=headers.get("ce-subject"),
        source=headers.get("ce-source"),
    )


async def _read_event_body(request: Request) -> Any:
    """Lê o corpo JSON do evento.

    Corpo vazio vira `{}`. Corpo não-JSON é repassado como texto para
    que o normalizer produza o envelope degradado.
    """
    raw_body = await request.body()
    if not raw_body:
        return {}
    try:
        return json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning(
            "invalid_event_body",
            extra={
                "content_type": request.headers.get("content-type"),
                "error": str(exc),
                "body_bytes": len(raw_body),
            },
        )
        return raw_body.decode("utf-8", errors="replace")


async def handle_document_event(kind: str, request: Request) -> dict[str, Any]:
    """Executa o use case para um tipo de evento; sempre responde 200."""
    correlation_id = request.headers.get("ce-id") or request.headers.get("x-correlation-id")
    token = set_correlation_id(correlation_id)
    try:
        raw_event = await _read_event_body(request)
        use_case = get_document_event_use_case()
        result = await use_case.execute(kind, raw_event, _build_trigger_context(request))
        return {"status": result.status}
    except Exception:
        logger.exception("trigger_request_failed", extra={"kind": kind})
        return {"status": "failed"}
    finally:
        reset_correlation_id(token)


@router.post("/created")
async def on_document_created(request: Request) -> dict[str, Any]:
    """Gatilho de criação de documento."""
    return await handle_document_event("created", request)


@router.post("/updated")
async def on_document_updated(request: Request) -> dict[str, Any]:
    """Gatilho de atualização de documento."""
    return await handle_document_event("updated", request)


@router.post("/deleted")
async def on_document_deleted(request: Request) -> dict[str, Any]:
    """Gatilho de remoção de documento."""
    return await handle_document_event("deleted", request)


@router.post("/")
async def on_document_event(request: Request) -> dict[str, Any]:
    """Gatilho único: o tipo vem do header `ce-type`."""
    ce_type = request.headers.get("ce-type")
    kind = resolve_kind_from_event_type(ce_type)
    if kind is None:
        logger.warning(
            "unsupported_event_type",
            extra={"ce_type": ce_type, "event_id": request.headers.get("ce-id")},
        )
        return {"status": "ignored"}
    return await handle_document_event(kind, request)
