"""Logging estruturado (JSON) do conector.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (app/bootstrap)
    configure_logging(level="INFO", service_name="firestore-webhook-connector")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("webhook_delivered", extra={"status_code": 200})

Campos presentes em todo log:
- correlation_id (id do CloudEvent quando disponível)
- service
- level
- logger
- message
- asctime

Nunca logar o envelope completo fora do nível DEBUG.
"""

from config.logging.config import configure_logging, get_logger, log_skip
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_skip",
]
