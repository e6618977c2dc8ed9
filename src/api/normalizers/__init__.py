"""Normalizers — conversão de eventos externos para modelos internos.

Estrutura:
- firestore/: eventos de documento Firestore (created/updated/deleted)
"""

from .firestore import FirestoreEventNormalizer, decode_value

__all__ = [
    "FirestoreEventNormalizer",
    "decode_value",
]
