"""Formatter JSON com os campos obrigatórios de todo log."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria JsonFormatter com campos padronizados.

    Exemplo de output:
        {"asctime": "...", "level": "INFO", "logger": "api.validators.messages.errors",
         "message": "message_request_rejected", "correlation_id": "abc-123",
         "service": "message_dispatch", "field_path": "messages"}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
