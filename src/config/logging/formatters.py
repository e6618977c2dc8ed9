"""Formatter JSON com campos padronizados.

Campos obrigatórios:
- asctime
- level (levelname)
- logger (name)
- message
- correlation_id
- service
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Valores não serializáveis passados via `extra` (ex: exceções) são
    convertidos com str().

    Exemplo de output:
        {
            "asctime": "2026-02-02 10:30:00,123",
            "level": "INFO",
            "logger": "api.connectors.webhook.dispatcher",
            "message": "webhook_delivered",
            "correlation_id": "8f1c...",
            "service": "firestore-webhook-connector",
            "status_code": 200
        }
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
        json_default=str,
        json_ensure_ascii=False,
    )
