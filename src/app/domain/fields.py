"""Tipos de campo reutilizáveis para os modelos de envio.

- PhoneNumber: remove separadores "-" na validação; serialização é identidade.
- NonEmptyList: coleção ordenada e imutável com pelo menos um item.
- OneOrMany: união discriminada explícita entre um valor e uma coleção.
- ReadOnlyMapping: mapeamento congelado após a validação; serializa como dict.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Annotated, Any, TypeVar, Union

from pydantic import AfterValidator, BaseModel, Discriminator, PlainSerializer, Tag
from pydantic_core import PydanticCustomError

from app.domain.errors import NON_EMPTY_ERROR_MESSAGE, NON_EMPTY_ERROR_TYPE

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

PHONE_SEPARATOR = "-"

ONE_TAG = "one"
MANY_TAG = "many"


def normalize_phone_number(value: str) -> str:
    """Remove todos os "-" do número. Idempotente, sem validar dígitos."""
    return value.replace(PHONE_SEPARATOR, "")


def ensure_non_empty(values: Sequence[T]) -> Sequence[T]:
    """Aceita a coleção somente se tiver ao menos um item.

    Raises:
        PydanticCustomError: non_empty_collection quando vazia.
    """
    if len(values) < 1:
        raise PydanticCustomError(NON_EMPTY_ERROR_TYPE, NON_EMPTY_ERROR_MESSAGE)
    return values


PhoneNumber = Annotated[str, AfterValidator(normalize_phone_number)]

NonEmptyList = Annotated[tuple[T, ...], AfterValidator(ensure_non_empty)]


def freeze_value(value: Any) -> Any:
    """Converte mapeamentos e listas aninhados em equivalentes somente leitura."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_value(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_value(item) for item in value)
    return value


def thaw_value(value: Any) -> Any:
    """Inverso de freeze_value, para serialização."""
    if isinstance(value, Mapping):
        return {key: thaw_value(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw_value(item) for item in value]
    return value


ReadOnlyMapping = Annotated[
    dict[K, V],
    AfterValidator(freeze_value),
    PlainSerializer(thaw_value),
]


def arity_tag(value: Any) -> str | None:
    """Classifica a entrada como valor único ou coleção, sem coerção.

    Returns:
        "many" para list/tuple, "one" para str, mapping ou modelo,
        None para qualquer outra coisa (tag não encontrada).
    """
    if isinstance(value, (list, tuple)):
        return MANY_TAG
    if isinstance(value, (str, Mapping, BaseModel)):
        return ONE_TAG
    return None


def _phone_arity_tag(value: Any) -> str:
    # Qualquer coisa que não seja coleção cai no ramo único e falha por tipo
    return MANY_TAG if isinstance(value, (list, tuple)) else ONE_TAG


PhoneNumbers = Annotated[
    Union[  # noqa: UP007 - membros anotados com Tag
        Annotated[PhoneNumber, Tag(ONE_TAG)],
        Annotated[NonEmptyList[PhoneNumber], Tag(MANY_TAG)],
    ],
    Discriminator(_phone_arity_tag),
]


__all__ = [
    "MANY_TAG",
    "ONE_TAG",
    "NonEmptyList",
    "PhoneNumber",
    "PhoneNumbers",
    "ReadOnlyMapping",
    "arity_tag",
    "ensure_non_empty",
    "freeze_value",
    "normalize_phone_number",
    "thaw_value",
]
