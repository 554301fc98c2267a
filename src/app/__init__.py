"""App: núcleo: domínio, casos de uso e wiring.

Subpastas:
- domain/: formatos canônicos das requisições de envio
- use_cases/: validação + entrega ao transporte
- protocols/: contratos do transporte e do validador
- observability/: correlation_id nos logs
- bootstrap/: inicialização e composition root
"""
