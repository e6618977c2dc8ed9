"""Configuração centralizada de logging.

Um único StreamHandler no root logger, com formatter JSON e filter que
injeta service e correlation_id. Cloud Run/Cloud Logging lê stdout/stderr
e indexa os campos JSON.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "firestore-webhook-connector"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Deve ser chamada uma vez na inicialização (app/bootstrap/).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: de ContextVar).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]

    # httpx loga cada request em INFO; o dispatcher já registra o resultado
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado (geralmente __name__)."""
    return logging.getLogger(name)


def log_skip(
    logger: logging.Logger,
    event: str,
    event_type: str,
    reason: str,
    **fields: object,
) -> None:
    """Log observável de entrega suprimida (sem payload).

    Args:
        logger: Logger instance.
        event: Nome do evento de log (ex: "webhook_disabled").
        event_type: Tipo do evento de documento (ex: "document_created").
        reason: Motivo curto da supressão (ex: "flag_disabled").
        **fields: Campos adicionais (ex: document_path).

    Exemplo:
        log_skip(logger, "webhook_disabled", "document_created", "flag_disabled")
    """
    extra: dict[str, object] = {
        "delivery_skipped": True,
        "event_type": event_type,
        "reason": reason,
    }
    extra.update(fields)
    logger.info(event, extra=extra)
