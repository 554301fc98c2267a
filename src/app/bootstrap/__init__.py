"""Bootstrap: inicialização e wiring do pipeline de envio.

Uso:
    from app.bootstrap import initialize_app, create_send_messages_use_case

    initialize_app()
    use_case = create_send_messages_use_case(transport)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.validators.messages import MessageRequestValidator
from app.domain.agent import ensure_default_agent
from app.observability import get_correlation_id
from app.use_cases.messages import SendMessagesUseCase
from config.logging import configure_logging
from config.settings import get_messaging_settings

if TYPE_CHECKING:
    from app.protocols import MessageTransportProtocol

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging, valida settings e materializa o Agent padrão.

    Deve ser chamada uma vez no início do processo.

    Raises:
        RuntimeError: Settings inválidas em staging/production.
        DefaultAgentConfigurationError: Agent padrão inválido (sempre fatal).
    """
    settings = get_messaging_settings()

    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
    )
    validate_runtime_settings()

    agent = ensure_default_agent()
    logger.info(
        "default_agent_ready",
        extra={"component": "bootstrap", "sdk_version": agent.sdk_version},
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido; em `development` apenas alerta.
    """
    settings = get_messaging_settings()
    errors = settings.validate()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "environment": settings.environment},
        )
        return

    if settings.environment in STRICT_VALIDATION_ENVS:
        raise RuntimeError(f"Settings inválidas: {'; '.join(errors)}")

    logger.warning(
        "settings_invalid",
        extra={"component": "bootstrap", "error_count": len(errors)},
    )


def create_send_messages_use_case(
    transport: MessageTransportProtocol,
) -> SendMessagesUseCase:
    """Conecta o validador padrão ao transporte informado."""
    return SendMessagesUseCase(validator=MessageRequestValidator(), transport=transport)
