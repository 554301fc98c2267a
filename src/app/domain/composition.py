"""Composição estrutural de modelos (omit + extend).

Deriva um modelo novo a partir do conjunto de campos de um modelo base:
remove os campos nomeados em `omit` e mescla as definições de `extend`.
A derivação acontece uma vez, na definição do módulo, nunca por request.

Uso:
    SendOneMessage = derive_model(
        "SendOneMessage",
        Message,
        omit=("to", "from_"),
        extend={"to": (PhoneNumbers, ...)},
    )
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, create_model

FieldDefinition = tuple[Any, Any]


def base_field_definitions(base: type[BaseModel]) -> dict[str, FieldDefinition]:
    """Retorna o mapa de campos do modelo base no formato do create_model."""
    return {
        name: (info.annotation, info)
        for name, info in base.model_fields.items()
    }


def derive_model(
    name: str,
    base: type[BaseModel],
    *,
    omit: Iterable[str] = (),
    extend: Mapping[str, FieldDefinition] | None = None,
    doc: str | None = None,
) -> type[BaseModel]:
    """Cria modelo derivado por álgebra de conjuntos de campos.

    Args:
        name: Nome do modelo derivado.
        base: Modelo base (config é herdada).
        omit: Campos removidos do base antes da extensão.
        extend: Campos adicionados/sobrescritos (nome -> (tipo, default|Field)).
        doc: Docstring do modelo derivado.

    Returns:
        Novo modelo pydantic com os campos restantes na ordem do base,
        seguidos dos campos novos.

    Raises:
        KeyError: Se `omit` nomeia campo inexistente no base.
    """
    fields = base_field_definitions(base)

    for field_name in omit:
        if field_name not in fields:
            raise KeyError(f"{base.__name__} não possui o campo {field_name!r}")
        del fields[field_name]

    fields.update(extend or {})

    return create_model(
        name,
        __config__=base.model_config,
        __doc__=doc or base.__doc__,
        __module__=base.__module__,
        **fields,
    )


__all__ = ["FieldDefinition", "base_field_definitions", "derive_model"]
