"""Conector de webhook de saída (POST JSON, tentativa única)."""

from api.connectors.webhook.dispatcher import WebhookDispatcher
from api.connectors.webhook.http_base import (
    HttpClient,
    HttpClientConfig,
    HttpError,
    HttpNoResponseError,
    HttpSetupError,
)

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "HttpNoResponseError",
    "HttpSetupError",
    "WebhookDispatcher",
]
