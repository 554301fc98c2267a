"""Validação de opções RCS antes de anexá-las a uma mensagem.

A lista de botões não tem tamanho mínimo nem máximo aplicado; o limite de
dois botões documentado pelo provedor é apenas informativo
(ver MAX_RCS_BUTTONS).
"""

from __future__ import annotations

from typing import Any

from api.validators.messages.errors import run_validation
from app.domain.rcs_option import AdditionalBody, RcsOption


def validate_rcs_option(data: Any) -> RcsOption:
    """Valida payload de RcsOption campo a campo (inclui aninhados).

    Raises:
        EnumMismatchError: mmsType fora de M3/S3/M4/S4/M5/S5/M6/S6.
        FieldTypeError: brandId ausente ou campos com tipo inválido.
    """
    return run_validation(RcsOption.model_validate, data, schema="rcs_option")


def validate_additional_body(data: Any) -> AdditionalBody:
    """Valida um slide (title/description obrigatórios)."""
    return run_validation(AdditionalBody.model_validate, data, schema="additional_body")


__all__ = ["validate_additional_body", "validate_rcs_option"]
