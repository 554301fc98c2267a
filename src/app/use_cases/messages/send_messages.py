"""Use case de envio: valida a entrada e entrega ao transporte."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.domain.errors import MessageRequestError
from app.domain.message import recipients_of
from app.domain.send_request import MultipleMessageSendingRequest
from app.observability import correlation_scope
from config.logging import get_logger

if TYPE_CHECKING:
    from app.domain.agent import Agent
    from app.domain.send_request import SingleMessageSendingRequest
    from app.protocols import MessageRequestValidatorProtocol, MessageTransportProtocol

logger = get_logger(__name__)


@dataclass(frozen=True)
class SendMessagesResult:
    """Resultado do envio (sucesso com resposta ou falha de validação)."""

    success: bool
    response: dict[str, Any] | None = None
    error_code: str | None = None
    error_message: str | None = None
    field_path: str | None = None

    @classmethod
    def from_error(cls, exc: MessageRequestError) -> SendMessagesResult:
        return cls(
            success=False,
            error_code=exc.error_code,
            error_message=str(exc),
            field_path=exc.dotted_path or None,
        )


class SendMessagesUseCase:
    """Orquestra validação, normalização e entrega ao transporte.

    O transporte nunca é chamado com requisição inválida; falhas do
    próprio transporte são propagadas sem retry.
    """

    def __init__(
        self,
        validator: MessageRequestValidatorProtocol,
        transport: MessageTransportProtocol,
    ) -> None:
        self._validator = validator
        self._transport = transport

    async def send_one(self, data: Any) -> SendMessagesResult:
        """Envia requisição única já no formato {message, agent?}."""
        try:
            request = self._validator.validate_single_request(data)
        except MessageRequestError as exc:
            return SendMessagesResult.from_error(exc)
        return await self._dispatch(request)

    async def send_many(self, data: Any) -> SendMessagesResult:
        """Envia requisição em lote {messages, agent?, ...}."""
        try:
            request = self._validator.validate_multiple_request(data)
        except MessageRequestError as exc:
            return SendMessagesResult.from_error(exc)
        return await self._dispatch(request)

    async def send(self, data: Any, agent: Agent | None = None) -> SendMessagesResult:
        """Envia mensagem única ou lista de mensagens, conforme o formato.

        Objeto vai para o envio único e lista para o envio em lote,
        mesmo quando a lista tem um só item.
        """
        try:
            resolved = self._validator.validate_send_input(data)
        except MessageRequestError as exc:
            return SendMessagesResult.from_error(exc)
        return await self._dispatch(resolved.to_request(agent))

    async def _dispatch(
        self,
        request: SingleMessageSendingRequest | MultipleMessageSendingRequest,
    ) -> SendMessagesResult:
        if isinstance(request, MultipleMessageSendingRequest):
            kind = "multiple"
            messages = request.messages
        else:
            kind = "single"
            messages = (request.message,)

        with correlation_scope():
            logger.info(
                "message_request_dispatched",
                extra={
                    "kind": kind,
                    "message_count": len(messages),
                    "recipient_count": sum(len(recipients_of(m)) for m in messages),
                },
            )
            response = await self._transport.send(kind, request.to_payload())

        return SendMessagesResult(success=True, response=response)
