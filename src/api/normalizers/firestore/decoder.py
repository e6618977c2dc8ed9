"""Decodificação de valores tagueados do Firestore.

Cada valor chega como objeto com uma única chave de tipo:

    {"stringValue": "abc"}            -> "abc"
    {"integerValue": "10"}            -> 10
    {"doubleValue": 1.5}              -> 1.5   ("NaN"/"Infinity" -> None)
    {"booleanValue": true}            -> True
    {"timestampValue": "2024-..."}    -> "2024-..."
    {"nullValue": null}               -> None
    {"arrayValue": {"values": [...]}} -> [...]
    {"mapValue": {"fields": {...}}}   -> {...}

Tags desconhecidas (referenceValue, geoPointValue, bytesValue ou futuras)
caem no fallback: o valor da chave presente é devolvido como está.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any

from utils.errors import MalformedEventError


def _decode_boolean(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() == "true"


def _decode_double(raw: Any) -> float | None:
    # "NaN"/"Infinity"/"-Infinity" não têm representação em JSON
    value = float(raw)
    return value if math.isfinite(value) else None


def _decode_timestamp(raw: Any) -> str:
    # Representação protobuf {seconds, nanos} em vez de RFC 3339
    if isinstance(raw, Mapping):
        seconds = int(raw.get("seconds", 0))
        nanos = int(raw.get("nanos", 0))
        moment = datetime.fromtimestamp(seconds, tz=UTC).replace(microsecond=nanos // 1000)
        return moment.isoformat().replace("+00:00", "Z")
    return str(raw)


_SCALAR_DECODERS: dict[str, Callable[[Any], Any]] = {
    "stringValue": str,
    "integerValue": int,
    "doubleValue": _decode_double,
    "booleanValue": _decode_boolean,
    "timestampValue": _decode_timestamp,
    "nullValue": lambda _raw: None,
}


def decode_value(value: Any) -> Any:
    """Converte um valor tagueado em valor Python simples.

    Valores que não são objetos (já simples) são devolvidos sem alteração.
    Objeto vazio vira `{}`.
    """
    if not isinstance(value, Mapping):
        return value

    for tag, decoder in _SCALAR_DECODERS.items():
        if tag in value:
            return decoder(value[tag])

    if "arrayValue" in value:
        return decode_array(value["arrayValue"])
    if "mapValue" in value:
        return decode_map(value["mapValue"])

    if not value:
        return {}
    # Fallback: primeira (única) chave presente
    return next(iter(value.values()))


def decode_array(array_value: Any) -> list[Any]:
    """Decodifica `arrayValue` preservando a ordem (vazio se ausente)."""
    if not array_value:
        return []
    if not isinstance(array_value, Mapping):
        raise MalformedEventError(f"arrayValue inválido: {type(array_value).__name__}")
    values = array_value.get("values") or []
    if not isinstance(values, list):
        raise MalformedEventError(f"arrayValue.values inválido: {type(values).__name__}")
    return [decode_value(item) for item in values]


def decode_map(map_value: Any) -> dict[str, Any]:
    """Decodifica `mapValue` recursivamente (vazio se ausente)."""
    if not map_value:
        return {}
    if not isinstance(map_value, Mapping):
        raise MalformedEventError(f"mapValue inválido: {type(map_value).__name__}")
    return decode_fields(map_value.get("fields"))


def decode_fields(fields: Mapping[str, Any] | None) -> dict[str, Any]:
    """Decodifica um mapa `fields` inteiro (vazio se ausente)."""
    if not fields:
        return {}
    if not isinstance(fields, Mapping):
        raise MalformedEventError(f"fields inválido: {type(fields).__name__}")
    return {key: decode_value(raw) for key, raw in fields.items()}
