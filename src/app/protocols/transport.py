"""Protocolo do colaborador de transporte (HTTP + autenticação)."""

from __future__ import annotations

from typing import Any, Literal, Protocol

SendKind = Literal["single", "multiple"]


class MessageTransportProtocol(Protocol):
    """Contrato mínimo para entregar uma requisição já validada.

    Retries, timeouts e backpressure são responsabilidade do transporte.
    """

    async def send(self, kind: SendKind, payload: dict[str, Any]) -> dict[str, Any]: ...
