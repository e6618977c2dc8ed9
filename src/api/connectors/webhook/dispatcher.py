"""Dispatcher de webhook — entrega do envelope ao destino configurado.

Fluxo por chamada (uma única tentativa, sem retry nem fila):
1. URL vazia -> skipped (warning)
2. Host fora do allow-list -> rejected (error)
3. POST JSON com timeout total -> delivered | remote_error | no_response | setup_error

Nenhuma falha é propagada ao chamador; o resultado é devolvido como
DeliveryOutcome e registrado em log.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from api.connectors.webhook.delivery_logging import (
    log_delivery_failure,
    log_delivery_success,
    truncate_body,
)
from api.connectors.webhook.http_base import (
    HttpClient,
    HttpClientConfig,
    HttpNoResponseError,
    HttpSetupError,
)
from api.validators import extract_host, is_allowed_webhook_url
from app.observability import get_correlation_id, record_delivery, record_latency
from app.protocols.models import DeliveryOutcome

if TYPE_CHECKING:
    import httpx

    from app.protocols.models import WebhookEnvelope
    from config.settings import WebhookSettings

logger = logging.getLogger(__name__)


class WebhookDispatcher:
    """Entrega envelopes de evento via HTTP POST.

    Args:
        settings: Destino, allow-list, timeout e headers.
        http_client: Cliente HTTP (injetável em testes). Se None, cria um
            com timeout e headers das settings.
    """

    def __init__(
        self,
        settings: WebhookSettings,
        http_client: HttpClient | None = None,
    ) -> None:
        self._settings = settings
        self._http = http_client or HttpClient(
            HttpClientConfig(
                timeout_seconds=settings.request_timeout_seconds,
                default_headers=settings.build_headers(),
            )
        )

    async def dispatch(
        self,
        event_type: str,
        envelope: WebhookEnvelope,
    ) -> DeliveryOutcome:
        """Entrega o envelope e classifica o resultado (nunca levanta)."""
        url = self._settings.url
        if not url:
            logger.warning(
                "webhook_url_not_configured",
                extra={"event_type": event_type},
            )
            return DeliveryOutcome(status="skipped", detail="webhook_url_not_configured")

        host = extract_host(url)
        if not is_allowed_webhook_url(url, self._settings.allowed_domains):
            logger.error(
                "webhook_url_not_allowed",
                extra={
                    "event_type": event_type,
                    "webhook_host": host,
                    "allowed_domains": list(self._settings.allowed_domains),
                },
            )
            return DeliveryOutcome(status="rejected", detail="webhook_url_not_allowed")

        logger.info(
            "webhook_attempt",
            extra={
                "event_type": event_type,
                "webhook_host": host,
                "document_path": envelope.document_path,
            },
        )
        outcome = await self._send(url, host, event_type, envelope)
        record_delivery(event_type, outcome.status, outcome.status_code)
        return outcome

    async def _send(
        self,
        url: str,
        host: str | None,
        event_type: str,
        envelope: WebhookEnvelope,
    ) -> DeliveryOutcome:
        start = time.perf_counter()
        try:
            response = await self._http.post(url, json=envelope.to_dict())
        except HttpNoResponseError as exc:
            log_delivery_failure(event_type, host, "no_response", cause=exc.cause)
            return DeliveryOutcome(status="no_response", detail=exc.cause)
        except HttpSetupError as exc:
            log_delivery_failure(event_type, host, "setup_error", error=exc.cause)
            return DeliveryOutcome(status="setup_error", detail=exc.cause)
        except Exception as exc:
            log_delivery_failure(
                event_type,
                host,
                "setup_error",
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return DeliveryOutcome(status="setup_error", detail=str(exc))
        finally:
            record_latency(
                "webhook_dispatcher",
                "post",
                (time.perf_counter() - start) * 1000,
                get_correlation_id(),
            )

        return self._classify_response(host, event_type, response)

    @staticmethod
    def _classify_response(
        host: str | None,
        event_type: str,
        response: httpx.Response,
    ) -> DeliveryOutcome:
        if response.is_success:
            log_delivery_success(event_type, host, response.status_code)
            logger.debug(
                "webhook_response_body",
                extra={"event_type": event_type, "response_body": truncate_body(response.text)},
            )
            return DeliveryOutcome(status="delivered", status_code=response.status_code)

        log_delivery_failure(
            event_type,
            host,
            "remote_error",
            status_code=response.status_code,
            status_text=response.reason_phrase,
            response_body=truncate_body(response.text),
        )
        return DeliveryOutcome(
            status="remote_error",
            status_code=response.status_code,
            detail=response.reason_phrase,
        )
