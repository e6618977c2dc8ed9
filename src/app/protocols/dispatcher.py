"""Protocolo de entrega de webhook."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import DeliveryOutcome, WebhookEnvelope


class WebhookDispatcherProtocol(Protocol):
    """Contrato mínimo para entregar envelope ao destino.

    Nunca levanta exceção: o resultado é classificado em DeliveryOutcome.
    """

    async def dispatch(
        self,
        event_type: str,
        envelope: WebhookEnvelope,
    ) -> DeliveryOutcome: ...
