"""Helpers de logging de entrega (sem URL completa nem payload).

A URL de destino costuma carregar um token no caminho; apenas o host é
registrado.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

MAX_LOGGED_BODY_CHARS = 4096


def log_delivery_success(event_type: str, host: str | None, status_code: int) -> None:
    """Loga entrega 2xx."""
    logger.info(
        "webhook_delivered",
        extra={
            "event_type": event_type,
            "webhook_host": host,
            "status_code": status_code,
        },
    )


def log_delivery_failure(
    event_type: str,
    host: str | None,
    failure_kind: str,
    **details: object,
) -> None:
    """Loga falha de entrega com a classificação (uma linha por falha)."""
    logger.error(
        "webhook_delivery_failed",
        extra={
            "event_type": event_type,
            "webhook_host": host,
            "failure_kind": failure_kind,
            **details,
        },
    )


def truncate_body(text: str) -> str:
    """Limita o corpo da resposta registrado em log."""
    if len(text) <= MAX_LOGGED_BODY_CHARS:
        return text
    return f"{text[:MAX_LOGGED_BODY_CHARS]}...[truncated {len(text) - MAX_LOGGED_BODY_CHARS} chars]"
