"""correlation_id por envio, propagado para os logs via ContextVar.

Uso:
    from app.observability import correlation_scope

    with correlation_scope() as correlation_id:
        logger.info("message_request_dispatched")
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual ("" se ausente)."""
    return _correlation_id.get()


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Define correlation_id no escopo, reaproveitando o atual se houver.

    Args:
        correlation_id: ID explícito. Se None, herda o atual ou gera UUID4.

    Yields:
        correlation_id efetivo do escopo.
    """
    value = correlation_id or get_correlation_id() or str(uuid.uuid4())
    token = _correlation_id.set(value)
    try:
        yield value
    finally:
        _correlation_id.reset(token)
