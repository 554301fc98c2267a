"""Settings do preparo de requisições de envio de mensagens.

Identidade do SDK (Agent), ambiente e nível de log.
"""

from __future__ import annotations

import os
import platform
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

PACKAGE_VERSION: str = "0.1.0"
DEFAULT_SDK_NAME: str = "python"
DEFAULT_SERVICE_NAME: str = "message_dispatch"

_VALID_ENVIRONMENTS = frozenset({"development", "staging", "production"})
_VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class MessagingSettings:
    """Configurações do pipeline de validação.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs
        log_level: Nível de log do serviço
        sdk_name: Prefixo do sdkVersion do Agent padrão (ex: python)
        sdk_version: Sobrescreve o sdkVersion inteiro do Agent padrão
        os_platform: Sobrescreve o osPlatform do Agent padrão
    """

    environment: Environment = "development"
    service_name: str = DEFAULT_SERVICE_NAME
    log_level: str = "INFO"

    # Agent
    sdk_name: str = DEFAULT_SDK_NAME
    sdk_version: str = ""
    os_platform: str = ""

    @property
    def agent_sdk_version(self) -> str:
        """sdkVersion efetivo do Agent padrão (ex: python/0.1.0)."""
        return self.sdk_version or f"{self.sdk_name}/{PACKAGE_VERSION}"

    @property
    def agent_os_platform(self) -> str:
        """osPlatform efetivo do Agent padrão (ex: Linux | 3.12.1)."""
        return self.os_platform or f"{platform.system()} | {platform.python_version()}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if self.environment not in _VALID_ENVIRONMENTS:
            errors.append(f"ENVIRONMENT inválido: {self.environment}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if self.log_level.upper() not in _VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")

        if not self.sdk_version and not self.sdk_name:
            errors.append("MESSAGING_SDK_NAME não pode ser vazio")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _load_from_env() -> MessagingSettings:
    """Carrega MessagingSettings de variáveis de ambiente."""
    return MessagingSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", DEFAULT_SERVICE_NAME),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        sdk_name=os.getenv("MESSAGING_SDK_NAME", DEFAULT_SDK_NAME),
        sdk_version=os.getenv("MESSAGING_SDK_VERSION", ""),
        os_platform=os.getenv("MESSAGING_OS_PLATFORM", ""),
    )


@lru_cache(maxsize=1)
def get_messaging_settings() -> MessagingSettings:
    """Retorna instância cacheada de MessagingSettings."""
    return _load_from_env()
