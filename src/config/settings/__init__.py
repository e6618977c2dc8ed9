"""Agregador de settings do conector de webhooks Firestore.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.triggers import (
    DEFAULT_DATABASE_NAME,
    DEFAULT_WILDCARD_PATH,
    DocumentEventKind,
    TriggerSettings,
    get_trigger_settings,
)
from config.settings.webhook import (
    DEFAULT_ALLOWED_DOMAINS,
    WebhookSettings,
    get_webhook_settings,
)


def clear_settings_cache() -> None:
    """Descarta settings cacheadas (recarrega do ambiente na próxima leitura)."""
    get_base_settings.cache_clear()
    get_trigger_settings.cache_clear()
    get_webhook_settings.cache_clear()


__all__ = [
    # Constants
    "DEFAULT_ALLOWED_DOMAINS",
    "DEFAULT_DATABASE_NAME",
    "DEFAULT_WILDCARD_PATH",
    # Base
    "BaseSettings",
    "DocumentEventKind",
    "Environment",
    # Triggers
    "TriggerSettings",
    # Webhook
    "WebhookSettings",
    "clear_settings_cache",
    "get_base_settings",
    "get_trigger_settings",
    "get_webhook_settings",
]
