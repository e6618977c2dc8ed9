"""Validadores de borda (destinos e limites externos).

Uso:
    from api.validators import is_allowed_webhook_url

    is_allowed_webhook_url("https://connect.pabbly.com/x", {"connect.pabbly.com"})
"""

from api.validators.webhook_url import extract_host, is_allowed_webhook_url

__all__ = [
    "extract_host",
    "is_allowed_webhook_url",
]
