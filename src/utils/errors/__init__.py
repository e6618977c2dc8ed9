"""Exceções utilitárias compartilhadas."""

from .exceptions import MalformedEventError, PipelineError

__all__ = [
    "MalformedEventError",
    "PipelineError",
]
