"""Resolução do formato de entrada: mensagem única ou lote.

Objeto (mapping/modelo) segue o ramo único; list/tuple segue o ramo de
lote, que exige ao menos uma mensagem. Nenhum formato é convertido no
outro: o consumidor recebe o ramo resolvido explicitamente.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from pydantic import TypeAdapter

from api.validators.messages.errors import run_validation
from app.domain.agent import Agent
from app.domain.send_request import (
    MultipleMessageSendingRequest,
    SendMessageInput,
    SingleMessageSendingRequest,
)

SendShape = Literal["single", "batch"]

# Construído uma vez na importação; somente leitura depois disso
_SEND_INPUT_ADAPTER: TypeAdapter[Any] = TypeAdapter(SendMessageInput)


@dataclass(frozen=True)
class ResolvedSendInput:
    """Resultado da resolução com o ramo explícito.

    Attributes:
        shape: "single" ou "batch"
        value: SendOneMessage (single) ou tupla de SendOneMessage (batch)
    """

    shape: SendShape
    value: Any

    @property
    def is_batch(self) -> bool:
        return self.shape == "batch"

    def to_request(
        self,
        agent: Agent | None = None,
    ) -> SingleMessageSendingRequest | MultipleMessageSendingRequest:
        """Monta a requisição correspondente ao ramo resolvido."""
        extra: dict[str, Any] = {"agent": agent} if agent is not None else {}
        if self.is_batch:
            return MultipleMessageSendingRequest(messages=self.value, **extra)
        return SingleMessageSendingRequest(message=self.value, **extra)


def resolve_send_message_input(data: Any) -> ResolvedSendInput:
    """Valida entrada "enviar mensagem(ns)" e identifica o formato.

    Args:
        data: Objeto de mensagem ou lista de objetos de mensagem.

    Returns:
        ResolvedSendInput com o ramo e o valor validado.

    Raises:
        ShapeMismatchError: Entrada não é objeto nem lista.
        ConstraintViolationError: Lista vazia.
        MessageRequestError: Demais falhas por elemento.
    """
    value = run_validation(
        _SEND_INPUT_ADAPTER.validate_python,
        data,
        schema="send_message_input",
        root_tagged=True,
    )
    shape: SendShape = "batch" if isinstance(value, tuple) else "single"
    return ResolvedSendInput(shape=shape, value=value)


__all__ = ["ResolvedSendInput", "SendShape", "resolve_send_message_input"]
