"""Testes dos endpoints de gatilho Firestore."""

from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request

import api.routes.firestore.triggers as triggers
from app.observability import get_correlation_id
from app.protocols.models import TriggerResult

DOC_NAME = "projects/demo/databases/(default)/documents/orders/42"


class RecordingUseCase:
    """Use case falso que registra o que o endpoint repassou."""

    def __init__(self, status: str = "processed") -> None:
        self.calls: list[dict[str, Any]] = []
        self._status = status

    async def execute(self, kind, raw_event, context=None) -> TriggerResult:
        self.calls.append(
            {
                "kind": kind,
                "raw_event": raw_event,
                "context": context,
                "correlation_id": get_correlation_id(),
            }
        )
        return TriggerResult(status=self._status, event_type=f"document_{kind}")


class ExplodingUseCase:
    async def execute(self, kind, raw_event, context=None) -> TriggerResult:
        raise RuntimeError("boom")


def _build_request(
    path: str,
    body: bytes,
    headers: dict[str, str] | None = None,
) -> Request:
    raw_headers = [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "path": path,
        "raw_path": path.encode(),
        "query_string": b"",
        "headers": raw_headers,
        "app": SimpleNamespace(state=SimpleNamespace()),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


@pytest.fixture
def use_case(monkeypatch: pytest.MonkeyPatch) -> RecordingUseCase:
    fake = RecordingUseCase()
    monkeypatch.setattr(triggers, "get_document_event_use_case", lambda: fake)
    return fake


class TestResolveKind:
    """Mapeamento de ce-type."""

    @pytest.mark.parametrize(
        ("ce_type", "expected"),
        [
            ("google.cloud.firestore.document.v1.created", "created"),
            ("google.cloud.firestore.document.v1.updated", "updated"),
            ("google.cloud.firestore.document.v1.deleted", "deleted"),
            ("google.cloud.firestore.document.v1.created.withAuthContext", "created"),
            ("google.cloud.firestore.document.v1.written", None),
            ("google.cloud.pubsub.topic.v1.messagePublished", None),
            (None, None),
        ],
    )
    def test_resolve_kind(self, ce_type: str | None, expected: str | None) -> None:
        """Apenas created/updated/deleted são suportados."""
        assert triggers.resolve_kind_from_event_type(ce_type) == expected


class TestHandleDocumentEvent:
    """Endpoint por tipo de evento."""

    @pytest.mark.asyncio
    async def test_passes_body_and_cloud_event_headers(self, use_case: RecordingUseCase) -> None:
        """Corpo JSON e headers ce-* chegam ao use case."""
        body = json.dumps({"value": {"name": DOC_NAME}}).encode()
        request = _build_request(
            "/events/firestore/created",
            body,
            {
                "ce-id": "evt-123",
                "ce-time": "2024-05-01T10:00:00Z",
                "ce-subject": "documents/orders/42",
                "ce-source": "//firestore.googleapis.com/projects/demo/databases/(default)",
            },
        )

        response = await triggers.on_document_created(request)

        assert response == {"status": "processed"}
        call = use_case.calls[0]
        assert call["kind"] == "created"
        assert call["raw_event"] == {"value": {"name": DOC_NAME}}
        assert call["context"].event_id == "evt-123"
        assert call["context"].subject == "documents/orders/42"
        assert call["correlation_id"] == "evt-123"
        assert get_correlation_id() == ""

    @pytest.mark.asyncio
    async def test_empty_body_becomes_empty_event(self, use_case: RecordingUseCase) -> None:
        """Corpo vazio vira {}."""
        await triggers.on_document_deleted(_build_request("/events/firestore/deleted", b""))
        assert use_case.calls[0]["raw_event"] == {}
        assert use_case.calls[0]["correlation_id"]

    @pytest.mark.asyncio
    async def test_invalid_json_is_forwarded_as_text(self, use_case: RecordingUseCase) -> None:
        """Corpo não-JSON segue como texto (vira envelope degradado)."""
        response = await triggers.on_document_updated(
            _build_request("/events/firestore/updated", b"\x0anot-json{")
        )
        assert response == {"status": "processed"}
        assert use_case.calls[0]["raw_event"] == "\nnot-json{"

    @pytest.mark.asyncio
    async def test_unexpected_error_still_answers(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Exceção não vira erro HTTP (evita reentrega)."""
        monkeypatch.setattr(triggers, "get_document_event_use_case", lambda: ExplodingUseCase())
        response = await triggers.on_document_created(
            _build_request("/events/firestore/created", b"{}")
        )
        assert response == {"status": "failed"}


class TestGenericEndpoint:
    """Endpoint único roteado por ce-type."""

    @pytest.mark.asyncio
    async def test_routes_by_ce_type(self, use_case: RecordingUseCase) -> None:
        """ce-type define o tipo de evento."""
        request = _build_request(
            "/events/firestore/",
            b"{}",
            {"ce-type": "google.cloud.firestore.document.v1.updated.withAuthContext"},
        )
        response = await triggers.on_document_event(request)
        assert response == {"status": "processed"}
        assert use_case.calls[0]["kind"] == "updated"

    @pytest.mark.asyncio
    async def test_unsupported_type_is_ignored(self, use_case: RecordingUseCase) -> None:
        """Tipo desconhecido responde ignored sem chamar o use case."""
        request = _build_request(
            "/events/firestore/",
            b"{}",
            {"ce-type": "google.cloud.firestore.document.v1.written"},
        )
        response = await triggers.on_document_event(request)
        assert response == {"status": "ignored"}
        assert use_case.calls == []


class TestRoutesMounted:
    """Rotas registradas na aplicação."""

    @pytest.mark.parametrize(
        ("path", "headers", "kind"),
        [
            ("/events/firestore/created", {}, "created"),
            ("/events/firestore/updated", {}, "updated"),
            ("/events/firestore/deleted", {}, "deleted"),
            ("/events/firestore/", {"ce-type": "google.cloud.firestore.document.v1.deleted"}, "deleted"),
        ],
    )
    def test_post_paths(
        self,
        use_case: RecordingUseCase,
        path: str,
        headers: dict[str, str],
        kind: str,
    ) -> None:
        """Cada endpoint responde 200 e chega ao use case."""
        from app.app import app

        client = TestClient(app)
        response = client.post(path, json={"value": {"name": DOC_NAME}}, headers=headers)

        assert response.status_code == 200
        assert response.json() == {"status": "processed"}
        assert use_case.calls[0]["kind"] == kind
