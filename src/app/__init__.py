"""App — orquestração, casos de uso e wiring.

Subpastas:
- bootstrap/: composition root (factories, inicialização, validação de settings)
- use_cases/: casos de uso (gatilho de documento -> normalização -> entrega)
- protocols/: contratos e modelos canônicos (envelope, resultados)
- observability/: correlation_id e métricas via logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
