"""Protocolo de validação de requisições de envio."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from api.validators.messages.shape import ResolvedSendInput
    from app.domain.send_request import (
        MultipleMessageSendingRequest,
        SingleMessageSendingRequest,
    )


class MessageRequestValidatorProtocol(Protocol):
    """Contrato mínimo para validar entrada bruta de envio."""

    def validate_single_request(self, data: Any) -> SingleMessageSendingRequest: ...

    def validate_multiple_request(self, data: Any) -> MultipleMessageSendingRequest: ...

    def validate_send_input(self, data: Any) -> ResolvedSendInput: ...
