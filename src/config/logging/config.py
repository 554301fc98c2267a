"""Configuração centralizada de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # Uma vez, no bootstrap
    configure_logging(level="INFO", service_name="message_dispatch")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("message_request_rejected", extra={"field_path": "messages"})

Logs estruturados, sem PII: nunca registrar telefones ou texto de mensagens.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter
from config.settings import DEFAULT_SERVICE_NAME

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura o root logger com um único handler JSON.

    Args:
        level: Nível de log (case insensitive).
        service_name: Nome do serviço injetado em todo record.
        correlation_id_getter: Função que retorna o correlation_id atual.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substitui handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger do módulo (service/correlation_id vêm do filter)."""
    return logging.getLogger(name)
