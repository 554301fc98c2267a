"""Validador central das requisições de envio de mensagens."""

from __future__ import annotations

from typing import Any

from api.validators.messages.errors import run_validation
from api.validators.messages.rcs import validate_rcs_option
from api.validators.messages.shape import ResolvedSendInput, resolve_send_message_input
from app.domain.message import SendOneMessage
from app.domain.rcs_option import RcsOption
from app.domain.send_request import (
    MultipleMessageSendingRequest,
    SingleMessageSendingRequest,
)


class MessageRequestValidator:
    """Valida e normaliza entrada bruta nos formatos de envio.

    Todos os métodos são puros: a mesma entrada produz o mesmo resultado
    e nenhuma falha é parcial.
    """

    def validate_single_request(self, data: Any) -> SingleMessageSendingRequest:
        """Valida requisição {message, agent?}."""
        return run_validation(
            SingleMessageSendingRequest.model_validate,
            data,
            schema="single_message_sending_request",
        )

    def validate_multiple_request(self, data: Any) -> MultipleMessageSendingRequest:
        """Valida requisição {messages, agent?, allowDuplicates?, ...}."""
        return run_validation(
            MultipleMessageSendingRequest.model_validate,
            data,
            schema="multiple_message_sending_request",
        )

    def validate_message(self, data: Any) -> SendOneMessage:
        """Valida uma mensagem isolada no formato de envio único."""
        return run_validation(SendOneMessage.model_validate, data, schema="send_one_message")

    def validate_send_input(self, data: Any) -> ResolvedSendInput:
        """Resolve objeto único ou lista de mensagens."""
        return resolve_send_message_input(data)

    def validate_rcs_option(self, data: Any) -> RcsOption:
        """Valida opções RCS isoladas."""
        return validate_rcs_option(data)


__all__ = ["MessageRequestValidator"]
