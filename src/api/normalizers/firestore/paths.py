"""Caminhos de documento Firestore.

Nome completo do recurso:
    projects/{project}/databases/{database}/documents/{collection}/{doc}[/...]

O envelope usa apenas o caminho relativo (`orders/42`). Os padrões de
caminho monitorado seguem a sintaxe dos gatilhos Firestore:
- `{param}` casa exatamente um segmento
- `{param=**}` casa zero ou mais segmentos
- qualquer outro segmento é literal
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

UNKNOWN_PATH = "unknown"

_RESOURCE_PREFIX = re.compile(
    r"^projects/[^/]+/databases/(?P<database>[^/]+)/documents(?:/|$)"
)
_SINGLE_WILDCARD = re.compile(r"^\{[^}=]+\}$")
_MULTI_WILDCARD = re.compile(r"^\{[^}=]+=\*\*\}$")


@dataclass(frozen=True, slots=True)
class DocumentName:
    """Nome de documento decomposto."""

    path: str
    database: str | None = None

    @property
    def segments(self) -> list[str]:
        return [segment for segment in self.path.split("/") if segment]

    @property
    def document_id(self) -> str:
        segments = self.segments
        return segments[-1] if segments else UNKNOWN_PATH

    @property
    def collection_id(self) -> str:
        segments = self.segments
        return segments[-2] if len(segments) >= 2 else UNKNOWN_PATH


def parse_document_name(name: str) -> DocumentName:
    """Separa banco e caminho relativo de um nome de recurso.

    Nomes já relativos são aceitos sem alteração (database=None).
    """
    match = _RESOURCE_PREFIX.match(name)
    if match is None:
        return DocumentName(path=name.strip("/"))
    return DocumentName(path=name[match.end():].strip("/"), database=match.group("database"))


def strip_resource_prefix(name: str) -> str:
    """Remove `projects/*/databases/*/documents/` do nome do recurso."""
    return parse_document_name(name).path


def matches_path_pattern(path: str, pattern: str) -> bool:
    """Verifica se o caminho relativo casa com o padrão monitorado."""
    path_segments = [segment for segment in path.split("/") if segment]
    pattern_segments = [segment for segment in pattern.split("/") if segment]
    return _match_segments(path_segments, pattern_segments)


def _match_segments(path: list[str], pattern: list[str]) -> bool:
    if not pattern:
        return not path

    head, rest = pattern[0], pattern[1:]
    if _MULTI_WILDCARD.match(head):
        return any(_match_segments(path[index:], rest) for index in range(len(path) + 1))

    if not path:
        return False
    if _SINGLE_WILDCARD.match(head) or head == path[0]:
        return _match_segments(path[1:], rest)
    return False


def resolve_event_document_name(raw_event: Any) -> DocumentName | None:
    """Lê o nome do documento de um evento bruto ainda não validado.

    Prefere `value.name` e depois `oldValue.name`. Devolve None quando o
    evento não tem nome legível (o normalizer trata esse caso).
    """
    if not isinstance(raw_event, Mapping):
        return None
    for key in ("value", "oldValue"):
        snapshot = raw_event.get(key)
        if isinstance(snapshot, Mapping):
            name = snapshot.get("name")
            if isinstance(name, str) and name:
                return parse_document_name(name)
    return None
