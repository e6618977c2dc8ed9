"""Modelos canônicos do pipeline de eventos de documento.

Todos são imutáveis e criados por evento; nada aqui é persistido.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

EventType = Literal["document_created", "document_updated", "document_deleted"]

EVENT_TYPES: frozenset[str] = frozenset(
    {"document_created", "document_updated", "document_deleted"}
)

EVENT_TYPE_BY_KIND: dict[str, EventType] = {
    "created": "document_created",
    "updated": "document_updated",
    "deleted": "document_deleted",
}

CanonicalRecord = dict[str, Any]

DeliveryStatus = Literal[
    "delivered",
    "skipped",
    "rejected",
    "remote_error",
    "no_response",
    "setup_error",
]

TriggerStatus = Literal["processed", "disabled", "not_monitored", "failed"]


@dataclass(frozen=True, slots=True)
class WebhookEnvelope:
    """Envelope JSON entregue ao destino do webhook.

    Exatamente um dos grupos é preenchido:
    - `data` para document_created/document_deleted
    - `before`/`after`/`changes` para document_updated
    - `error`/`error_message` no envelope degradado (falha de normalização)
    """

    event_type: str
    document_path: str
    timestamp: str
    document_id: str | None = None
    collection_id: str | None = None
    data: CanonicalRecord | None = None
    before: CanonicalRecord | None = None
    after: CanonicalRecord | None = None
    changes: dict[str, Any] | None = None
    error: str | None = None
    error_message: str | None = None

    @property
    def is_degraded(self) -> bool:
        """Retorna True se o envelope veio de uma falha de normalização."""
        return self.error is not None

    def to_dict(self) -> dict[str, Any]:
        """Serializa no formato do corpo do POST (camelCase, sem nulos)."""
        fields = (
            ("eventType", self.event_type),
            ("documentPath", self.document_path),
            ("documentId", self.document_id),
            ("collectionId", self.collection_id),
            ("timestamp", self.timestamp),
            ("data", self.data),
            ("before", self.before),
            ("after", self.after),
            ("changes", self.changes),
            ("error", self.error),
            ("errorMessage", self.error_message),
        )
        return {key: value for key, value in fields if value is not None}


@dataclass(frozen=True, slots=True)
class DeliveryOutcome:
    """Classificação do resultado de uma tentativa de entrega.

    Atributos:
        status: delivered | skipped | rejected | remote_error | no_response | setup_error
        status_code: Status HTTP (apenas quando houve resposta)
        detail: Causa resumida (motivo, reason phrase ou mensagem de erro)
    """

    status: DeliveryStatus
    status_code: int | None = None
    detail: str | None = None

    @property
    def delivered(self) -> bool:
        return self.status == "delivered"

    @property
    def is_failure(self) -> bool:
        """Falhas de entrega propriamente ditas (não inclui supressões)."""
        return self.status in ("remote_error", "no_response", "setup_error")


@dataclass(frozen=True, slots=True)
class TriggerResult:
    """O que o adapter de gatilho observou para um evento."""

    status: TriggerStatus
    event_type: str
    outcome: DeliveryOutcome | None = None
