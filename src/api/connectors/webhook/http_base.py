"""Cliente HTTP de tentativa única para entregas de webhook.

Sem retries: cada chamada é uma tentativa. As falhas são separadas em
duas classes para que o chamador classifique o resultado:
- HttpSetupError: a requisição não pôde ser montada/enviada
- HttpNoResponseError: enviada, mas sem resposta (timeout, conexão)

Respostas com status não-2xx NÃO são exceção; o chamador inspeciona.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP.

    `timeout_seconds` limita o tempo total da tentativa (conexão, envio e
    leitura da resposta). `transport` permite injetar httpx.MockTransport.
    """

    timeout_seconds: float = 15.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    transport: httpx.AsyncBaseTransport | None = None


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(self, message: str, cause: str | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class HttpSetupError(HttpError):
    """Requisição não pôde ser construída ou enviada."""


class HttpNoResponseError(HttpError):
    """Requisição enviada sem resposta (timeout ou falha de conexão)."""


class HttpClient:
    """Cliente HTTP simples para POST JSON."""

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    async def post(
        self,
        url: str,
        json: Any,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Envia POST JSON e devolve a resposta (qualquer status).

        Raises:
            HttpSetupError: URL inválida, protocolo não suportado ou corpo
                não serializável.
            HttpNoResponseError: timeout ou erro de transporte.
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        async with httpx.AsyncClient(
            verify=self._config.verify_ssl,
            transport=self._config.transport,
            timeout=self._config.timeout_seconds,
        ) as client:
            try:
                request = client.build_request(
                    "POST",
                    url,
                    json=json,
                    headers=merged_headers,
                )
            except (httpx.InvalidURL, TypeError, ValueError) as exc:
                raise HttpSetupError("http_request_setup_failed", cause=str(exc)) from exc

            try:
                async with asyncio.timeout(self._config.timeout_seconds):
                    return await client.send(request)
            except httpx.UnsupportedProtocol as exc:
                raise HttpSetupError("http_request_setup_failed", cause=str(exc)) from exc
            except TimeoutError as exc:
                raise HttpNoResponseError(
                    "http_no_response",
                    cause=f"timeout after {self._config.timeout_seconds}s",
                ) from exc
            except httpx.RequestError as exc:
                raise HttpNoResponseError(
                    "http_no_response",
                    cause=f"{type(exc).__name__}: {exc}",
                ) from exc
