"""Testes da decodificação de valores tagueados do Firestore."""

from __future__ import annotations

import pytest

from api.normalizers.firestore import decode_value
from api.normalizers.firestore.decoder import decode_array, decode_fields, decode_map
from utils.errors import MalformedEventError


class TestDecodeScalars:
    """Valores escalares."""

    @pytest.mark.parametrize(
        ("tagged", "expected"),
        [
            ({"stringValue": "abc"}, "abc"),
            ({"integerValue": "10"}, 10),
            ({"integerValue": 7}, 7),
            ({"doubleValue": 1.5}, 1.5),
            ({"doubleValue": "2"}, 2.0),
            ({"booleanValue": True}, True),
            ({"booleanValue": False}, False),
            ({"nullValue": None}, None),
            ({"nullValue": "NULL_VALUE"}, None),
            ({"timestampValue": "2024-05-01T10:00:00Z"}, "2024-05-01T10:00:00Z"),
        ],
    )
    def test_scalar_tags(self, tagged: dict, expected: object) -> None:
        """Cada tag escalar vira o valor Python correspondente."""
        result = decode_value(tagged)
        assert result == expected
        assert type(result) is type(expected)

    def test_boolean_from_string(self) -> None:
        """booleanValue textual."""
        assert decode_value({"booleanValue": "true"}) is True
        assert decode_value({"booleanValue": "false"}) is False

    def test_timestamp_seconds_nanos(self) -> None:
        """Timestamp protobuf {seconds, nanos} vira RFC 3339 em UTC."""
        result = decode_value({"timestampValue": {"seconds": 0, "nanos": 500_000_000}})
        assert result == "1970-01-01T00:00:00.500000Z"

    @pytest.mark.parametrize("raw", ["NaN", "Infinity", "-Infinity", float("nan")])
    def test_non_finite_double_becomes_none(self, raw: object) -> None:
        """Doubles não finitos viram None (serializáveis em JSON)."""
        assert decode_value({"doubleValue": raw}) is None

    def test_non_finite_double_inside_containers(self) -> None:
        """A conversão vale também dentro de arrays e mapas."""
        tagged = {
            "mapValue": {
                "fields": {
                    "ratio": {"doubleValue": "Infinity"},
                    "series": {"arrayValue": {"values": [{"doubleValue": "NaN"}, {"doubleValue": 0.5}]}},
                }
            }
        }
        assert decode_value(tagged) == {"ratio": None, "series": [None, 0.5]}

    def test_invalid_integer_raises(self) -> None:
        """integerValue não numérico é erro de conversão."""
        with pytest.raises(ValueError):
            decode_value({"integerValue": "dez"})


class TestDecodeFallback:
    """Entradas fora do formato tagueado."""

    def test_plain_values_pass_through(self) -> None:
        """Valores não-objeto são devolvidos sem alteração."""
        assert decode_value("texto") == "texto"
        assert decode_value(3) == 3
        assert decode_value(None) is None

    def test_empty_object(self) -> None:
        """Objeto vazio vira {}."""
        assert decode_value({}) == {}

    def test_unknown_tag_returns_raw_value(self) -> None:
        """Tags desconhecidas devolvem o valor da chave presente."""
        assert decode_value({"referenceValue": "projects/p/databases/(default)/documents/a/b"}) == (
            "projects/p/databases/(default)/documents/a/b"
        )
        geo = {"latitude": 1.0, "longitude": 2.0}
        assert decode_value({"geoPointValue": geo}) == geo

    def test_unknown_multi_key_returns_first(self) -> None:
        """Objeto com várias chaves desconhecidas devolve a primeira."""
        assert decode_value({"fooValue": 1, "barValue": 2}) == 1


class TestDecodeContainers:
    """Arrays e mapas (recursivos)."""

    def test_array_preserves_order(self) -> None:
        """arrayValue decodifica itens na ordem."""
        tagged = {
            "arrayValue": {
                "values": [
                    {"integerValue": "1"},
                    {"stringValue": "b"},
                    {"nullValue": None},
                ]
            }
        }
        assert decode_value(tagged) == [1, "b", None]

    def test_empty_array(self) -> None:
        """arrayValue sem values vira lista vazia."""
        assert decode_value({"arrayValue": {}}) == []
        assert decode_array(None) == []

    def test_nested_map(self) -> None:
        """mapValue com arrays e mapas aninhados."""
        tagged = {
            "mapValue": {
                "fields": {
                    "address": {
                        "mapValue": {"fields": {"city": {"stringValue": "Recife"}}}
                    },
                    "tags": {"arrayValue": {"values": [{"stringValue": "vip"}]}},
                }
            }
        }
        assert decode_value(tagged) == {"address": {"city": "Recife"}, "tags": ["vip"]}

    def test_empty_map(self) -> None:
        """mapValue sem fields vira dict vazio."""
        assert decode_value({"mapValue": {}}) == {}
        assert decode_map(None) == {}

    def test_decode_fields(self) -> None:
        """Mapa `fields` inteiro de um snapshot."""
        fields = {"name": {"stringValue": "Ana"}, "age": {"integerValue": "30"}}
        assert decode_fields(fields) == {"name": "Ana", "age": 30}
        assert decode_fields(None) == {}

    @pytest.mark.parametrize(
        "tagged",
        [
            {"arrayValue": "x"},
            {"arrayValue": {"values": "x"}},
            {"mapValue": ["x"]},
        ],
    )
    def test_malformed_containers_raise(self, tagged: dict) -> None:
        """Estruturas com formato inválido levantam MalformedEventError."""
        with pytest.raises(MalformedEventError):
            decode_value(tagged)

    def test_malformed_fields_raise(self) -> None:
        """`fields` que não é mapa."""
        with pytest.raises(MalformedEventError):
            decode_fields(["a"])  # type: ignore[arg-type]
