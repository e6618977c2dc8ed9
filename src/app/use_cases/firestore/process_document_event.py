"""Use case do gatilho de documento Firestore (adapter de borda).

Para cada evento recebido:
1. Flag do tipo desabilitada -> nada é normalizado nem enviado
2. Documento fora do banco/caminho monitorado -> idem
3. Normaliza e entrega (o dispatcher nunca levanta)

Sempre devolve TriggerResult; nenhuma exceção chega ao host, que
reentregaria o evento se a requisição falhasse.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from api.normalizers.firestore.paths import (
    DocumentName,
    matches_path_pattern,
    resolve_event_document_name,
)
from app.protocols.models import EVENT_TYPE_BY_KIND, TriggerResult
from config.logging import log_skip

if TYPE_CHECKING:
    from app.protocols.dispatcher import WebhookDispatcherProtocol
    from app.protocols.normalizer import EventNormalizerProtocol
    from config.settings import DocumentEventKind, TriggerSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TriggerContext:
    """Metadados do CloudEvent (apenas para logs)."""

    event_id: str | None = None
    event_time: str | None = None
    subject: str | None = None
    source: str | None = None


class ProcessDocumentEventUseCase:
    """Orquestra flag, filtro de caminho, normalização e entrega."""

    def __init__(
        self,
        settings: TriggerSettings,
        normalizer: EventNormalizerProtocol,
        dispatcher: WebhookDispatcherProtocol,
    ) -> None:
        self._settings = settings
        self._normalizer = normalizer
        self._dispatcher = dispatcher

    async def execute(
        self,
        kind: DocumentEventKind,
        raw_event: Any,
        context: TriggerContext | None = None,
    ) -> TriggerResult:
        """Processa um evento de documento sem nunca levantar exceção."""
        event_type = EVENT_TYPE_BY_KIND[kind]
        context = context or TriggerContext()
        logger.info(
            "trigger_received",
            extra={
                "event_type": event_type,
                "event_id": context.event_id,
                "event_time": context.event_time,
                "document": context.subject,
                "event_source": context.source,
            },
        )

        try:
            if not self._settings.is_enabled(kind):
                log_skip(logger, "webhook_disabled", event_type, "flag_disabled")
                return TriggerResult(status="disabled", event_type=event_type)

            name = resolve_event_document_name(raw_event)
            if name is not None and not self._is_monitored(kind, name):
                log_skip(
                    logger,
                    "document_path_not_monitored",
                    event_type,
                    "path_not_monitored",
                    document_path=name.path,
                    database=name.database,
                )
                return TriggerResult(status="not_monitored", event_type=event_type)

            envelope = self._normalizer.normalize(event_type, raw_event)
            outcome = await self._dispatcher.dispatch(event_type, envelope)
        except Exception:
            logger.exception("trigger_processing_failed", extra={"event_type": event_type})
            return TriggerResult(status="failed", event_type=event_type)

        logger.info(
            "trigger_processed",
            extra={
                "event_type": event_type,
                "delivery_status": outcome.status,
                "degraded": envelope.is_degraded,
            },
        )
        return TriggerResult(status="processed", event_type=event_type, outcome=outcome)

    def _is_monitored(self, kind: DocumentEventKind, name: DocumentName) -> bool:
        if name.database is not None and name.database != self._settings.database_name:
            return False
        return matches_path_pattern(name.path, self._settings.path_pattern(kind))
