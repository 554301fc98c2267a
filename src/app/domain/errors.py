"""Taxonomia de erros da validação de requisições de envio.

Todo erro carrega o caminho do campo ofensor e uma mensagem legível.
Nenhum erro é parcial: a requisição é aceita inteira ou rejeitada inteira.
"""

from __future__ import annotations

from typing import Any

# Tipos de erro customizados emitidos pelos validadores pydantic
NON_EMPTY_ERROR_TYPE = "non_empty_collection"
SHAPE_MISMATCH_ERROR_TYPE = "shape_mismatch"

NON_EMPTY_ERROR_MESSAGE = "at least one entry is required"

FieldPath = tuple[str | int, ...]


class MessageRequestError(ValueError):
    """Base para falhas de validação de requisições de envio.

    Args:
        message: Mensagem legível (sem PII).
        field_path: Caminho do campo ofensor (vazio = raiz).
        errors: Erros brutos do pydantic que originaram a falha.
    """

    error_code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str,
        field_path: FieldPath = (),
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.field_path = tuple(field_path)
        self.errors = list(errors or [])
        super().__init__(self._render())

    @property
    def dotted_path(self) -> str:
        """Caminho do campo em notação pontuada (ex: messages.0.to)."""
        return ".".join(str(part) for part in self.field_path)

    def _render(self) -> str:
        if not self.field_path:
            return self.message
        return f"{self.dotted_path}: {self.message}"


class ShapeMismatchError(MessageRequestError):
    """Entrada não corresponde a nenhuma variante conhecida (single ou batch)."""

    error_code = "SHAPE_MISMATCH"


class ConstraintViolationError(MessageRequestError):
    """Valor estruturalmente válido que viola uma regra (ex: lista vazia)."""

    error_code = "CONSTRAINT_VIOLATION"


class EnumMismatchError(MessageRequestError):
    """Campo restrito a um conjunto literal recebeu valor fora do conjunto."""

    error_code = "ENUM_MISMATCH"

    def __init__(
        self,
        message: str,
        field_path: FieldPath = (),
        errors: list[dict[str, Any]] | None = None,
        value: Any = None,
        allowed: tuple[str, ...] = (),
    ) -> None:
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(message, field_path, errors)


class FieldTypeError(MessageRequestError):
    """Valor com tipo primitivo/estruturado diferente do esperado."""

    error_code = "FIELD_TYPE"


class DefaultAgentConfigurationError(RuntimeError):
    """Agent padrão não pôde ser materializado. Fatal no startup."""


__all__ = [
    "NON_EMPTY_ERROR_MESSAGE",
    "NON_EMPTY_ERROR_TYPE",
    "SHAPE_MISMATCH_ERROR_TYPE",
    "ConstraintViolationError",
    "DefaultAgentConfigurationError",
    "EnumMismatchError",
    "FieldPath",
    "FieldTypeError",
    "MessageRequestError",
    "ShapeMismatchError",
]
