"""Tradução de erros do pydantic para a taxonomia de erros de envio.

Quando há vários erros, vence o mais específico na ordem:
formato > restrição > enum > tipo de campo. O caminho do campo exclui
as tags internas das uniões discriminadas.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import ValidationError

from app.domain.errors import (
    NON_EMPTY_ERROR_TYPE,
    SHAPE_MISMATCH_ERROR_TYPE,
    ConstraintViolationError,
    EnumMismatchError,
    FieldPath,
    FieldTypeError,
    MessageRequestError,
    ShapeMismatchError,
)
from app.domain.fields import MANY_TAG, ONE_TAG
from config.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)

_SHAPE_TYPES = frozenset({SHAPE_MISMATCH_ERROR_TYPE, "union_tag_not_found", "union_tag_invalid"})
_ROOT_SHAPE_TYPES = frozenset({"model_type", "model_attributes_type", "dict_type"})
_CONSTRAINT_TYPES = frozenset({NON_EMPTY_ERROR_TYPE, "too_short"})
_ENUM_TYPES = frozenset({"literal_error", "enum"})

_UNION_TAGS = frozenset({ONE_TAG, MANY_TAG})
# Campo cujo valor é a união "um ou vários" telefones
_TAGGED_FIELD = "to"
_QUOTED = re.compile(r"'([^']*)'")

_PRIORITY: tuple[type[MessageRequestError], ...] = (
    ShapeMismatchError,
    ConstraintViolationError,
    EnumMismatchError,
    FieldTypeError,
)


def classify_error(
    error: dict[str, Any], *, root_tagged: bool = False
) -> type[MessageRequestError]:
    """Mapeia um erro do pydantic para a classe de erro de domínio."""
    error_type = error["type"]
    if error_type in _SHAPE_TYPES:
        return ShapeMismatchError
    if error_type in _ROOT_SHAPE_TYPES and not field_path_of(error, root_tagged=root_tagged):
        return ShapeMismatchError
    if error_type in _CONSTRAINT_TYPES:
        return ConstraintViolationError
    if error_type in _ENUM_TYPES:
        return EnumMismatchError
    return FieldTypeError


def field_path_of(error: dict[str, Any], *, root_tagged: bool = False) -> FieldPath:
    """Caminho do campo sem as tags de união discriminada.

    Uma tag só é removida na posição em que a união aparece: na raiz
    (quando o formato validado é a própria união) ou logo após o campo
    "to". Chaves do chamador com o mesmo texto permanecem no caminho.
    """
    loc = error["loc"]
    return tuple(
        part
        for index, part in enumerate(loc)
        if not (part in _UNION_TAGS and _is_tag_position(loc, index, root_tagged))
    )


def _is_tag_position(loc: tuple[Any, ...], index: int, root_tagged: bool) -> bool:
    if index == 0:
        return root_tagged
    return loc[index - 1] == _TAGGED_FIELD


def _allowed_values(error: dict[str, Any]) -> tuple[str, ...]:
    expected = (error.get("ctx") or {}).get("expected", "")
    return tuple(_QUOTED.findall(str(expected)))


def translate_validation_error(
    exc: ValidationError, *, root_tagged: bool = False
) -> MessageRequestError:
    """Converte ValidationError do pydantic no erro de domínio mais específico.

    Args:
        exc: Erro levantado pela validação pydantic.
        root_tagged: True quando o formato validado é uma união discriminada
            na raiz (o primeiro segmento do caminho é a tag).

    Returns:
        MessageRequestError (subclasse) com caminho, mensagem e erros brutos.
    """
    errors = exc.errors(include_url=False)

    def rank(err: dict[str, Any]) -> int:
        return _PRIORITY.index(classify_error(err, root_tagged=root_tagged))

    chosen = min(errors, key=rank)
    error_cls = classify_error(chosen, root_tagged=root_tagged)
    path = field_path_of(chosen, root_tagged=root_tagged)

    if error_cls is EnumMismatchError:
        allowed = _allowed_values(chosen)
        value = chosen.get("input")
        return EnumMismatchError(
            f"{value!r} is not one of: {', '.join(allowed)}",
            path,
            errors,
            value=value,
            allowed=allowed,
        )

    return error_cls(chosen["msg"], path, errors)


def run_validation(
    validate: Callable[[Any], T],
    data: Any,
    *,
    schema: str,
    root_tagged: bool = False,
) -> T:
    """Executa a validação e traduz falhas para a taxonomia de domínio.

    Args:
        validate: Função de validação (ex: Model.model_validate).
        data: Entrada bruta do chamador.
        schema: Nome do formato validado (apenas para log).
        root_tagged: Repassado a translate_validation_error.

    Raises:
        MessageRequestError: Subclasse conforme o tipo de falha.
    """
    try:
        return validate(data)
    except ValidationError as exc:
        error = translate_validation_error(exc, root_tagged=root_tagged)
        # Sem PII: só caminho e tipo de erro, nunca valores
        logger.info(
            "message_request_rejected",
            extra={
                "schema": schema,
                "error_type": error.error_code,
                "field_path": error.dotted_path,
                "error_count": len(error.errors),
            },
        )
        raise error from exc


__all__ = [
    "classify_error",
    "field_path_of",
    "run_validation",
    "translate_validation_error",
]
