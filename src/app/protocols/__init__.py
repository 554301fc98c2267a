"""Protocolos e contratos do core da aplicação."""

from .transport import MessageTransportProtocol, SendKind
from .validator import MessageRequestValidatorProtocol

__all__ = [
    "MessageRequestValidatorProtocol",
    "MessageTransportProtocol",
    "SendKind",
]
