"""Validação do destino de webhook contra o allow-list de domínios.

Falha fechada: URL vazia, malformada ou sem host é rejeitada (False),
nunca levanta exceção. O esquema não é verificado aqui; https é exigido
na validação de configuração (WebhookSettings.validate).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)


def extract_host(url: str) -> str | None:
    """Retorna o host (minúsculo) da URL, ou None se inválida."""
    if not url or not url.strip():
        return None
    try:
        parts = urlsplit(url.strip())
        # .port levanta ValueError para porta inválida
        parts.port  # noqa: B018
    except ValueError as exc:
        logger.warning("webhook_url_unparsable", extra={"error": str(exc)})
        return None
    host = parts.hostname
    return host.rstrip(".") if host else None


def is_allowed_webhook_url(url: str, allowed_domains: Iterable[str]) -> bool:
    """Verifica se o host da URL está no allow-list.

    Aceita o domínio exato ou qualquer subdomínio separado por ponto
    (`sub.connect.pabbly.com` casa com `connect.pabbly.com`;
    `evilconnect.pabbly.com` não).

    Args:
        url: URL de destino.
        allowed_domains: Domínios permitidos.

    Returns:
        True se permitido.
    """
    host = extract_host(url)
    if not host:
        return False

    for domain in allowed_domains:
        normalized = domain.strip().lower().rstrip(".")
        if not normalized:
            continue
        if host == normalized or host.endswith(f".{normalized}"):
            return True
    return False
