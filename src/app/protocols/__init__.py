"""Protocolos e contratos do core da aplicação."""

from .dispatcher import WebhookDispatcherProtocol
from .models import (
    EVENT_TYPE_BY_KIND,
    EVENT_TYPES,
    CanonicalRecord,
    DeliveryOutcome,
    DeliveryStatus,
    EventType,
    TriggerResult,
    TriggerStatus,
    WebhookEnvelope,
)
from .normalizer import EventNormalizerProtocol

__all__ = [
    "EVENT_TYPES",
    "EVENT_TYPE_BY_KIND",
    "CanonicalRecord",
    "DeliveryOutcome",
    "DeliveryStatus",
    "EventNormalizerProtocol",
    "EventType",
    "TriggerResult",
    "TriggerStatus",
    "WebhookDispatcherProtocol",
    "WebhookEnvelope",
]
