"""API — camada de borda e adapters externos.

Responsabilidades:
- Receber eventos do Firestore (routes/)
- Normalizar eventos para o envelope canônico (normalizers/)
- Validar destinos de entrega (validators/)
- Entregar envelopes via HTTP (connectors/)

NÃO PODE conter: regras de habilitação, filtros de caminho ou orquestração.
"""
