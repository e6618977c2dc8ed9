"""Registro de métricas via structured logging.

As métricas são logs estruturados agregáveis depois (log-based metrics
do Cloud Logging, BigQuery sink, etc.).

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Entrega: contador de resultados de entrega por status

Uso:
    start = time.perf_counter()
    # ... operação ...
    record_latency("webhook_dispatcher", "post", (time.perf_counter() - start) * 1000)
    record_delivery("document_created", "delivered", status_code=200)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "webhook_dispatcher")
        operation: Nome da operação (ex: "post")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    extra: dict[str, object] = {
        "metric_type": "latency",
        "component": component,
        "operation": operation,
        "latency_ms": round(latency_ms, 2),
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    logger.info("metric_latency", extra=extra)


def record_delivery(
    event_type: str,
    status: str,
    status_code: int | None = None,
) -> None:
    """Registra resultado de entrega de webhook.

    Args:
        event_type: Tipo do evento (ex: "document_updated")
        status: Status do DeliveryOutcome (ex: "delivered", "no_response")
        status_code: Status HTTP quando houve resposta
    """
    logger.info(
        "metric_webhook_delivery",
        extra={
            "metric_type": "counter",
            "event_type": event_type,
            "delivery_status": status,
            "status_code": status_code,
        },
    )
