"""Use cases de eventos de documento Firestore."""

from .process_document_event import ProcessDocumentEventUseCase, TriggerContext

__all__ = [
    "ProcessDocumentEventUseCase",
    "TriggerContext",
]
