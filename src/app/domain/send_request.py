"""Requisições de envio (único e em lote) e a entrada ambígua de envio.

Ambos os formatos recebem o Agent padrão quando o chamador o omite.
A entrada "enviar mensagem(ns)" é uma união discriminada explícita:
objeto único e lista de objetos permanecem formatos distintos.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Annotated, Any, Union

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from app.domain.agent import Agent, get_default_agent
from app.domain.errors import SHAPE_MISMATCH_ERROR_TYPE
from app.domain.fields import MANY_TAG, ONE_TAG, NonEmptyList, arity_tag
from app.domain.message import SendOneMessage

REQUEST_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
    extra="forbid",
)

SCHEDULED_DATE_ERROR_TYPE = "scheduled_date_type"


def _coerce_scheduled_date(value: Any) -> Any:
    """Aceita apenas datetime, date ou string; date puro vira meia-noite.

    Raises:
        PydanticCustomError: Para qualquer outro tipo (ex: timestamp numérico).
    """
    if isinstance(value, (datetime, str)):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    raise PydanticCustomError(
        SCHEDULED_DATE_ERROR_TYPE,
        "scheduled date must be a datetime, a date or a date string",
    )


def _as_utc(value: datetime) -> datetime:
    # Sem fuso informado, o horário é interpretado como UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


ScheduledDate = Annotated[
    datetime,
    BeforeValidator(_coerce_scheduled_date),
    AfterValidator(_as_utc),
]


class _SendingRequest(BaseModel):
    model_config = REQUEST_CONFIG

    agent: Agent = Field(default_factory=get_default_agent)

    def to_payload(self) -> dict[str, Any]:
        """Serializa para o colaborador de transporte (camelCase, sem None)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class SingleMessageSendingRequest(_SendingRequest):
    """Envio de uma única mensagem."""

    message: SendOneMessage


class MultipleMessageSendingRequest(_SendingRequest):
    """Envio em lote.

    Attributes:
        messages: Mensagens em ordem (pelo menos uma)
        allow_duplicates: Permite mensagens idênticas no mesmo lote
        scheduled_date: Agendamento em UTC (datetime, date ou string parseável)
        show_message_list: Inclui a lista de mensagens na resposta
    """

    messages: NonEmptyList[SendOneMessage]
    allow_duplicates: bool | None = None
    scheduled_date: ScheduledDate | None = None
    show_message_list: bool | None = None


SendMessageInput = Annotated[
    Union[  # noqa: UP007 - membros anotados com Tag
        Annotated[SendOneMessage, Tag(ONE_TAG)],
        Annotated[NonEmptyList[SendOneMessage], Tag(MANY_TAG)],
    ],
    Discriminator(
        arity_tag,
        custom_error_type=SHAPE_MISMATCH_ERROR_TYPE,
        custom_error_message="input must be a message object or a list of message objects",
    ),
]


__all__ = [
    "REQUEST_CONFIG",
    "SCHEDULED_DATE_ERROR_TYPE",
    "MultipleMessageSendingRequest",
    "ScheduledDate",
    "SendMessageInput",
    "SingleMessageSendingRequest",
]
