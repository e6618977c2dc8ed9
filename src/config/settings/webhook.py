"""Settings do destino de webhook.

Destino único (HTTP POST) para onde os envelopes de eventos Firestore
são entregues. O allow-list de domínios restringe o host; o esquema
https é exigido aqui, na validação de configuração.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import urlsplit

DEFAULT_ALLOWED_DOMAINS: tuple[str, ...] = ("connect.pabbly.com", "webhook.site")
DEFAULT_USER_AGENT = "Firestore-Webhook-Connector/1.0.0"
DEFAULT_SOURCE_NAME = "firestore-webhook-connector"


@dataclass(frozen=True)
class WebhookSettings:
    """Configurações de entrega de webhook.

    Attributes:
        url: URL de destino (vazia = entregas desativadas)
        allowed_domains: Domínios permitidos (match exato ou subdomínio)
        request_timeout_seconds: Timeout total do POST
        user_agent: User-Agent enviado no POST
        source_name: Valor do header X-Webhook-Source
    """

    url: str = ""
    allowed_domains: tuple[str, ...] = DEFAULT_ALLOWED_DOMAINS
    request_timeout_seconds: float = 15.0
    user_agent: str = DEFAULT_USER_AGENT
    source_name: str = DEFAULT_SOURCE_NAME

    @property
    def is_configured(self) -> bool:
        """Retorna True se há URL de destino."""
        return bool(self.url)

    def build_headers(self) -> dict[str, str]:
        """Headers fixos de toda entrega."""
        return {
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
            "X-Webhook-Source": self.source_name,
        }

    def validate(self) -> list[str]:
        """Valida configurações de webhook.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.url:
            errors.append("WEBHOOK_URL não configurado")
        elif urlsplit(self.url).scheme != "https":
            errors.append("WEBHOOK_URL deve usar https://")

        if not self.allowed_domains:
            errors.append("WEBHOOK_ALLOWED_DOMAINS não pode ser vazio")

        if self.request_timeout_seconds <= 0:
            errors.append("WEBHOOK_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _parse_domains(raw: str | None) -> tuple[str, ...]:
    """Converte lista separada por vírgula em tupla normalizada."""
    if raw is None:
        return DEFAULT_ALLOWED_DOMAINS
    return tuple(
        domain.strip().lower().rstrip(".")
        for domain in raw.split(",")
        if domain.strip()
    )


def _load_from_env() -> WebhookSettings:
    """Carrega WebhookSettings de variáveis de ambiente."""
    return WebhookSettings(
        url=os.getenv("WEBHOOK_URL", "").strip(),
        allowed_domains=_parse_domains(os.getenv("WEBHOOK_ALLOWED_DOMAINS")),
        request_timeout_seconds=float(os.getenv("WEBHOOK_TIMEOUT_SECONDS", "15")),
        user_agent=os.getenv("WEBHOOK_USER_AGENT", DEFAULT_USER_AGENT),
        source_name=os.getenv("WEBHOOK_SOURCE_NAME", DEFAULT_SOURCE_NAME),
    )


@lru_cache(maxsize=1)
def get_webhook_settings() -> WebhookSettings:
    """Retorna instância cacheada de WebhookSettings."""
    return _load_from_env()
