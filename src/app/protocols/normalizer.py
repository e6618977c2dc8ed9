"""Protocolo de normalização de eventos de documento."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import WebhookEnvelope


class EventNormalizerProtocol(Protocol):
    """Contrato mínimo para normalizar evento bruto em envelope.

    Nunca levanta exceção: falhas produzem envelope degradado.
    """

    def normalize(self, event_type: str, raw_event: Any) -> WebhookEnvelope: ...
