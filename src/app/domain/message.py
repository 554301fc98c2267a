"""Modelo base de mensagem e formato de envio único derivado.

Message é a unidade entregável. SendOneMessage deriva de Message trocando
a tipagem de `to`/`from` por números de telefone normalizados:
`to` aceita um número ou lista não vazia; `from` é opcional.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.domain.composition import derive_model
from app.domain.fields import PhoneNumber, PhoneNumbers, ReadOnlyMapping
from app.domain.rcs_option import RcsOption

MessageType = Literal[
    "SMS",
    "LMS",
    "MMS",
    "ATA",
    "CTA",
    "CTI",
    "NSA",
    "RCS_SMS",
    "RCS_LMS",
    "RCS_MMS",
    "RCS_TPL",
    "RCS_ITPL",
    "RCS_LTPL",
    "FAX",
    "VOICE",
]

# Chaves desconhecidas são descartadas (campos de conteúdo são externos)
MESSAGE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
    extra="ignore",
)


class Message(BaseModel):
    """Mensagem entregável (forma base, sem normalização de telefone)."""

    model_config = MESSAGE_CONFIG

    to: str
    from_: str | None = Field(default=None, alias="from")
    text: str | None = None
    type: MessageType | None = None
    subject: str | None = None
    image_id: str | None = None
    country: str | None = None
    auto_type_detect: bool | None = None
    custom_fields: ReadOnlyMapping[str, str] | None = None
    replacements: tuple[ReadOnlyMapping[str, str], ...] | None = None
    rcs_options: RcsOption | None = None
    # Opções Kakao, fax e voz pertencem a outros colaboradores: repassadas sem validação
    kakao_options: ReadOnlyMapping[str, Any] | None = None
    fax_options: ReadOnlyMapping[str, Any] | None = None
    voice_options: ReadOnlyMapping[str, Any] | None = None


SendOneMessage = derive_model(
    "SendOneMessage",
    Message,
    omit=("to", "from_"),
    extend={
        "to": (PhoneNumbers, ...),
        "from_": (PhoneNumber | None, Field(default=None, alias="from")),
    },
    doc="Mensagem de envio único: `to`/`from` com telefones normalizados.",
)


def recipients_of(message: BaseModel) -> tuple[str, ...]:
    """Retorna os destinatários como tupla, qualquer que seja o ramo de `to`."""
    to = message.to
    return (to,) if isinstance(to, str) else tuple(to)


__all__ = [
    "MESSAGE_CONFIG",
    "Message",
    "MessageType",
    "SendOneMessage",
    "recipients_of",
]
