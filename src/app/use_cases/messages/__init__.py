"""Use cases de envio de mensagens."""

from app.use_cases.messages.send_messages import SendMessagesResult, SendMessagesUseCase

__all__ = ["SendMessagesResult", "SendMessagesUseCase"]
