"""Normalizer Firestore — eventos de documento para envelope de webhook.

- models: formato de fio do evento (pydantic)
- decoder: valores tagueados (stringValue, mapValue, ...) para Python
- paths: nome de recurso, caminho relativo e padrões monitorados
- normalizer: envelope canônico e diff de updates
"""

from .decoder import decode_array, decode_fields, decode_map, decode_value
from .models import DocumentEventData, DocumentSnapshot
from .normalizer import (
    DEGRADED_ERROR,
    FirestoreEventNormalizer,
    build_record,
    compute_changes,
    utc_now_iso,
    values_equal,
)
from .paths import (
    UNKNOWN_PATH,
    DocumentName,
    matches_path_pattern,
    parse_document_name,
    resolve_event_document_name,
    strip_resource_prefix,
)

__all__ = [
    "DEGRADED_ERROR",
    "UNKNOWN_PATH",
    "DocumentEventData",
    "DocumentName",
    "DocumentSnapshot",
    "FirestoreEventNormalizer",
    "build_record",
    "compute_changes",
    "decode_array",
    "decode_fields",
    "decode_map",
    "decode_value",
    "matches_path_pattern",
    "parse_document_name",
    "resolve_event_document_name",
    "strip_resource_prefix",
    "utc_now_iso",
    "values_equal",
]
