"""Validadores das requisições de envio de mensagens (SMS/LMS/MMS/RCS).

Uso:
    from api.validators.messages import MessageRequestValidator

    validator = MessageRequestValidator()
    request = validator.validate_single_request(
        {"message": {"to": "010-1234-5678", "text": "oi"}}
    )
    request.message.to  # "01012345678"
"""

from api.validators.messages.errors import (
    classify_error,
    run_validation,
    translate_validation_error,
)
from api.validators.messages.rcs import validate_additional_body, validate_rcs_option
from api.validators.messages.shape import ResolvedSendInput, resolve_send_message_input
from api.validators.messages.validator_dispatcher import MessageRequestValidator

__all__ = [
    "MessageRequestValidator",
    "ResolvedSendInput",
    "classify_error",
    "resolve_send_message_input",
    "run_validation",
    "translate_validation_error",
    "validate_additional_body",
    "validate_rcs_option",
]
