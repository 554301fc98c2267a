"""Opções RCS (canal de mensagens com foto e botões).

RcsButton é de propriedade de um colaborador externo: aqui só se valida
que cada botão é um objeto; seus campos internos passam adiante intactos.
"""

from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.domain.fields import ReadOnlyMapping

MmsType = Literal["M3", "S3", "M4", "S4", "M5", "S5", "M6", "S6"]

# M: tamanho médio, S: pequeno, número: quantidade de fotos
MMS_TYPES: tuple[str, ...] = get_args(MmsType)

# Limite documentado pelo provedor; não é aplicado na validação
MAX_RCS_BUTTONS = 2

_RCS_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
    extra="forbid",
)


class RcsButton(BaseModel):
    """Botão RCS opaco (campos definidos pelo colaborador externo)."""

    model_config = ConfigDict(frozen=True, extra="allow")


RcsButtons = tuple[RcsButton, ...]


class AdditionalBody(BaseModel):
    """Conteúdo de um slide em mensagem RCS com fotos."""

    model_config = _RCS_CONFIG

    title: str
    description: str
    # Válido apenas quando o tipo de imagem é MMS
    image_id: str | None = None
    buttons: RcsButtons | None = None


class RcsOption(BaseModel):
    """Parâmetros de envio RCS anexados a uma mensagem."""

    model_config = _RCS_CONFIG

    brand_id: str
    template_id: str | None = None
    copy_allowed: bool | None = None
    # Ex: {"#{nome}": "Maria"}
    variables: ReadOnlyMapping[str, str] | None = None
    mms_type: MmsType | None = None
    commercial_type: bool | None = None
    # Ausente ou False: em caso de falha, reenvia como SMS/LMS/MMS
    disable_sms: bool | None = None
    additional_body: AdditionalBody | None = None
    buttons: RcsButtons | None = None

    @property
    def allows_sms_fallback(self) -> bool:
        return not self.disable_sms


__all__ = [
    "MAX_RCS_BUTTONS",
    "MMS_TYPES",
    "AdditionalBody",
    "MmsType",
    "RcsButton",
    "RcsButtons",
    "RcsOption",
]
