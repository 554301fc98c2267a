"""Validators: validação de payloads antes do envio à API externa.

Estrutura:
- messages/: requisições de envio SMS/LMS/MMS/RCS
"""

__all__: list[str] = []
