"""API: camada de borda: validação e normalização de payloads de envio.

Subpastas:
- validators/: validação de requisições e tradução de erros

NÃO PODE conter: transporte HTTP, autenticação, orquestração de use cases.
"""
