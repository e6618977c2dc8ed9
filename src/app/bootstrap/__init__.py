"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging, valida settings e conecta
implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_document_event_use_case

    initialize_app()
    use_case = get_document_event_use_case()
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import TYPE_CHECKING

from api.validators import is_allowed_webhook_url
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_trigger_settings,
    get_webhook_settings,
)

if TYPE_CHECKING:
    from app.use_cases.firestore import ProcessDocumentEventUseCase

SERVICE_NAME = "firestore-webhook-connector"

DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado. Chamar uma vez no início do serviço.

    `LOG_LEVEL` tem precedência; sem ele, `DEBUG=true` liga o nível DEBUG.
    """
    base = get_base_settings()
    default_level = "DEBUG" if base.debug else DEFAULT_LOG_LEVEL
    log_level = os.getenv("LOG_LEVEL", default_level).upper()

    configure_logging(
        level=log_level,
        service_name=base.service_name or SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors() -> list[str]:
    """Reúne erros de validação de todas as settings."""
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in get_base_settings().validate())

    webhook = get_webhook_settings()
    errors.extend(f"webhook: {error}" for error in webhook.validate())
    if webhook.url and not is_allowed_webhook_url(webhook.url, webhook.allowed_domains):
        allowed = ", ".join(webhook.allowed_domains)
        errors.append(f"webhook: WEBHOOK_URL fora dos domínios permitidos ({allowed})")

    errors.extend(f"triggers: {error}" for error in get_trigger_settings().validate())
    return errors


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    errors = collect_settings_errors()
    context = {
        "component": "bootstrap",
        "environment": base.environment,
        "gcp_project": base.gcp_project,
    }

    if not errors:
        logger.info("settings_validated", extra={**context, "result": "ok"})
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            **context,
            "result": "failed",
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


@lru_cache(maxsize=1)
def get_document_event_use_case() -> ProcessDocumentEventUseCase:
    """Obtém o use case de eventos de documento (singleton)."""
    from app.bootstrap.dependencies import create_document_event_use_case

    return create_document_event_use_case()
