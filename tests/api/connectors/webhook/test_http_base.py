"""Testes do HttpClient de tentativa única."""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from api.connectors.webhook import (
    HttpClient,
    HttpClientConfig,
    HttpNoResponseError,
    HttpSetupError,
)


def _client(handler, timeout_seconds: float = 5.0, headers: dict[str, str] | None = None) -> HttpClient:
    return HttpClient(
        HttpClientConfig(
            timeout_seconds=timeout_seconds,
            default_headers=headers or {},
            transport=httpx.MockTransport(handler),
        )
    )


@pytest.mark.asyncio
async def test_post_sends_json_with_merged_headers() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(201, text="ok")

    client = _client(handler, headers={"User-Agent": "UA/1", "X-Webhook-Source": "src"})
    response = await client.post(
        "https://webhook.site/abc",
        json={"eventType": "document_created"},
        headers={"X-Extra": "1"},
    )

    assert response.status_code == 201
    request = captured[0]
    assert request.method == "POST"
    assert json.loads(request.content) == {"eventType": "document_created"}
    assert request.headers["user-agent"] == "UA/1"
    assert request.headers["x-webhook-source"] == "src"
    assert request.headers["x-extra"] == "1"


@pytest.mark.asyncio
async def test_post_returns_non_2xx_without_raising() -> None:
    client = _client(lambda request: httpx.Response(500, text="boom"))
    response = await client.post("https://webhook.site/abc", json={})
    assert response.status_code == 500


@pytest.mark.asyncio
async def test_post_transport_error_is_no_response() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(HttpNoResponseError) as exc_info:
        await _client(handler).post("https://webhook.site/abc", json={})

    assert "ConnectError" in (exc_info.value.cause or "")


@pytest.mark.asyncio
async def test_post_total_timeout_is_no_response() -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(1)
        return httpx.Response(200)

    with pytest.raises(HttpNoResponseError) as exc_info:
        await _client(handler, timeout_seconds=0.05).post("https://webhook.site/abc", json={})

    assert exc_info.value.cause == "timeout after 0.05s"


@pytest.mark.asyncio
async def test_post_unsupported_protocol_is_setup_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.UnsupportedProtocol("Request URL has an unsupported protocol 'ftp://'.")

    with pytest.raises(HttpSetupError):
        await _client(handler).post("ftp://webhook.site/abc", json={})


@pytest.mark.asyncio
async def test_post_unserializable_body_is_setup_error() -> None:
    client = _client(lambda request: httpx.Response(200))
    with pytest.raises(HttpSetupError):
        await client.post("https://webhook.site/abc", json={"value": object()})
