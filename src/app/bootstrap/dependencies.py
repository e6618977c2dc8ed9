"""Factories — criação das implementações concretas do pipeline.

Cada factory recebe settings opcionais; sem elas, lê do ambiente.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.webhook import HttpClient, HttpClientConfig, WebhookDispatcher
from api.normalizers.firestore import FirestoreEventNormalizer
from app.use_cases.firestore import ProcessDocumentEventUseCase
from config.settings import get_trigger_settings, get_webhook_settings

if TYPE_CHECKING:
    from config.settings import TriggerSettings, WebhookSettings

logger = logging.getLogger(__name__)


def create_event_normalizer() -> FirestoreEventNormalizer:
    """Cria normalizer de eventos Firestore."""
    return FirestoreEventNormalizer()


def create_webhook_dispatcher(
    settings: WebhookSettings | None = None,
) -> WebhookDispatcher:
    """Cria dispatcher com timeout e headers das settings."""
    webhook = settings or get_webhook_settings()
    http_client = HttpClient(
        HttpClientConfig(
            timeout_seconds=webhook.request_timeout_seconds,
            default_headers=webhook.build_headers(),
        )
    )
    return WebhookDispatcher(webhook, http_client=http_client)


def create_document_event_use_case(
    trigger_settings: TriggerSettings | None = None,
    webhook_settings: WebhookSettings | None = None,
) -> ProcessDocumentEventUseCase:
    """Cria o use case completo (normalizer + dispatcher)."""
    triggers = trigger_settings or get_trigger_settings()
    logger.info(
        "document_event_use_case_created",
        extra={
            "enable_create": triggers.enable_create,
            "enable_update": triggers.enable_update,
            "enable_delete": triggers.enable_delete,
            "database_name": triggers.database_name,
        },
    )
    return ProcessDocumentEventUseCase(
        settings=triggers,
        normalizer=create_event_normalizer(),
        dispatcher=create_webhook_dispatcher(webhook_settings),
    )
