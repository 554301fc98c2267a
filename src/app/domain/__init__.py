"""Domínio: formatos canônicos de requisições de envio de mensagens."""

from app.domain.agent import Agent, ensure_default_agent, get_default_agent
from app.domain.composition import derive_model
from app.domain.errors import (
    ConstraintViolationError,
    DefaultAgentConfigurationError,
    EnumMismatchError,
    FieldTypeError,
    MessageRequestError,
    ShapeMismatchError,
)
from app.domain.fields import (
    NonEmptyList,
    PhoneNumber,
    PhoneNumbers,
    ReadOnlyMapping,
    ensure_non_empty,
    normalize_phone_number,
)
from app.domain.message import Message, SendOneMessage, recipients_of
from app.domain.rcs_option import (
    MAX_RCS_BUTTONS,
    MMS_TYPES,
    AdditionalBody,
    RcsButton,
    RcsOption,
)
from app.domain.send_request import (
    MultipleMessageSendingRequest,
    SendMessageInput,
    SingleMessageSendingRequest,
)

__all__ = [
    "MAX_RCS_BUTTONS",
    "MMS_TYPES",
    "AdditionalBody",
    "Agent",
    "ConstraintViolationError",
    "DefaultAgentConfigurationError",
    "EnumMismatchError",
    "FieldTypeError",
    "Message",
    "MessageRequestError",
    "MultipleMessageSendingRequest",
    "NonEmptyList",
    "PhoneNumber",
    "PhoneNumbers",
    "RcsButton",
    "RcsOption",
    "ReadOnlyMapping",
    "SendMessageInput",
    "SendOneMessage",
    "ShapeMismatchError",
    "SingleMessageSendingRequest",
    "derive_model",
    "ensure_default_agent",
    "ensure_non_empty",
    "get_default_agent",
    "normalize_phone_number",
    "recipients_of",
]
