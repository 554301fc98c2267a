"""Logging estruturado JSON (python-json-logger).

Campos obrigatórios em todo log: asctime, level, logger, message,
correlation_id, service.
"""

from config.logging.config import VALID_LOG_LEVELS, configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "VALID_LOG_LEVELS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
