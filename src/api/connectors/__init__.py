"""Connectors — adapters de borda para destinos externos.

Estrutura:
- webhook/: entrega de envelopes via HTTP POST
"""

__all__: list[str] = []
