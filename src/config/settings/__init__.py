"""Agregador de settings do serviço de envio.

Re-exporta settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.messaging import (
    DEFAULT_SDK_NAME,
    DEFAULT_SERVICE_NAME,
    PACKAGE_VERSION,
    Environment,
    MessagingSettings,
    get_messaging_settings,
)

__all__ = [
    "DEFAULT_SDK_NAME",
    "DEFAULT_SERVICE_NAME",
    "PACKAGE_VERSION",
    "Environment",
    "MessagingSettings",
    "get_messaging_settings",
]
