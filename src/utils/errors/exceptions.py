"""Exceções de domínio do pipeline de eventos."""

from __future__ import annotations


class PipelineError(RuntimeError):
    """Base para falhas internas do pipeline (normalização/entrega)."""


class MalformedEventError(PipelineError):
    """Evento bruto com formato inesperado (snapshot, fields ou tipo)."""
