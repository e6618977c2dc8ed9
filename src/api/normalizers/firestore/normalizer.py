"""Normalizer de eventos de documento Firestore.

Responsabilidades:
- Resolver caminho, id, coleção e timestamp do evento
- Decodificar snapshots antes/depois em registros canônicos
- Calcular o diff por campo em updates
- Nunca propagar exceção: qualquer falha vira envelope degradado

Formato de `changes` (updates): `{campo: {"before": ..., "after": ...}}`,
com `null` no lado em que o campo não existe. O campo `id` nunca entra
no diff.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from app.protocols.models import EVENT_TYPES, CanonicalRecord, WebhookEnvelope
from utils.errors import MalformedEventError

from .decoder import decode_fields
from .models import DocumentEventData, DocumentSnapshot
from .paths import UNKNOWN_PATH, DocumentName, parse_document_name

logger = logging.getLogger(__name__)

DEGRADED_ERROR = "Failed to transform event data"

_MISSING = object()


def utc_now_iso(clock: Callable[[], datetime] | None = None) -> str:
    """Timestamp ISO-8601 em UTC com milissegundos e sufixo Z."""
    moment = (clock or _utc_now)()
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _utc_now() -> datetime:
    return datetime.now(UTC)


def build_record(snapshot: DocumentSnapshot | None, document_id: str) -> CanonicalRecord:
    """Registro canônico: `id` sintético mais os campos decodificados.

    Um campo do documento chamado `id` sobrescreve o id sintético.
    """
    record: CanonicalRecord = {"id": document_id}
    if snapshot is not None:
        record.update(decode_fields(snapshot.fields))
    return record


def values_equal(left: Any, right: Any) -> bool:
    """Igualdade estrutural pela representação JSON canônica.

    Distingue `1`, `1.0` e `true`; ignora a ordem das chaves.
    """
    if left is _MISSING or right is _MISSING:
        return left is right
    return _canonical_json(left) == _canonical_json(right)


def compute_changes(before: CanonicalRecord, after: CanonicalRecord) -> dict[str, Any]:
    """Diff por campo entre dois registros (exceto `id`)."""
    changes: dict[str, Any] = {}
    for key in dict.fromkeys([*before, *after]):
        if key == "id":
            continue
        before_value = before.get(key, _MISSING)
        after_value = after.get(key, _MISSING)
        if values_equal(before_value, after_value):
            continue
        changes[key] = {
            "before": None if before_value is _MISSING else before_value,
            "after": None if after_value is _MISSING else after_value,
        }
    return changes


def _canonical_json(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"), default=str)


class FirestoreEventNormalizer:
    """Converte eventos brutos Firestore em WebhookEnvelope.

    Args:
        clock: Fonte de horário (injetável em testes). Padrão: agora em UTC.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or _utc_now

    def normalize(self, event_type: str, raw_event: Any) -> WebhookEnvelope:
        """Normaliza o evento; em caso de falha devolve envelope degradado."""
        try:
            return self._normalize(event_type, raw_event)
        except Exception as exc:
            logger.error(
                "event_normalization_failed",
                extra={
                    "event_type": event_type,
                    "error_type": type(exc).__name__,
                    "error": str(exc),
                },
            )
            return WebhookEnvelope(
                event_type=event_type,
                document_path=UNKNOWN_PATH,
                timestamp=utc_now_iso(self._clock),
                error=DEGRADED_ERROR,
                error_message=str(exc),
            )

    def _normalize(self, event_type: str, raw_event: Any) -> WebhookEnvelope:
        if event_type not in EVENT_TYPES:
            raise MalformedEventError(f"Tipo de evento não suportado: {event_type}")

        event = DocumentEventData.model_validate(raw_event if raw_event is not None else {})
        name = self._resolve_name(event)
        timestamp = self._resolve_timestamp(event)

        envelope_base: dict[str, Any] = {
            "event_type": event_type,
            "document_path": name.path or UNKNOWN_PATH,
            "document_id": name.document_id,
            "collection_id": name.collection_id,
            "timestamp": timestamp,
        }

        if event_type == "document_updated":
            before = build_record(event.old_value, name.document_id)
            after = build_record(event.value, name.document_id)
            return WebhookEnvelope(
                **envelope_base,
                before=before,
                after=after,
                changes=compute_changes(before, after),
            )

        snapshot = event.value if event_type == "document_created" else event.old_value
        return WebhookEnvelope(
            **envelope_base,
            data=build_record(snapshot, name.document_id),
        )

    @staticmethod
    def _resolve_name(event: DocumentEventData) -> DocumentName:
        for snapshot in (event.value, event.old_value):
            if snapshot is not None and snapshot.name:
                return parse_document_name(snapshot.name)
        return DocumentName(path=UNKNOWN_PATH)

    def _resolve_timestamp(self, event: DocumentEventData) -> str:
        for snapshot in (event.value, event.old_value):
            if snapshot is not None and snapshot.update_time:
                return snapshot.update_time
        return utc_now_iso(self._clock)
