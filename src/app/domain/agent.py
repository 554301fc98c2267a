"""Agent: metadados do cliente que envia a requisição.

O Agent padrão é materializado uma única vez validando um input vazio
contra o próprio modelo; o valor é imutável e reutilizado por todo o
processo sempre que o chamador omite o campo.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from app.domain.errors import DefaultAgentConfigurationError
from config.settings import get_messaging_settings


def _default_sdk_version() -> str:
    return get_messaging_settings().agent_sdk_version


def _default_os_platform() -> str:
    return get_messaging_settings().agent_os_platform


class Agent(BaseModel):
    """Identidade do SDK e plataforma de quem envia."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    sdk_version: str = Field(default_factory=_default_sdk_version)
    os_platform: str = Field(default_factory=_default_os_platform)


@lru_cache(maxsize=1)
def get_default_agent() -> Agent:
    """Retorna o Agent padrão (computado uma vez, cacheado).

    Corridas entre threads são toleradas: a computação é pura e
    determinística, qualquer recomputação produz valor igual.
    """
    return Agent.model_validate({})


def ensure_default_agent() -> Agent:
    """Materializa o Agent padrão no startup.

    Raises:
        DefaultAgentConfigurationError: Se o Agent padrão for inválido.
    """
    try:
        return get_default_agent()
    except ValidationError as exc:
        raise DefaultAgentConfigurationError(
            f"Agent padrão inválido: {exc.error_count()} erro(s)"
        ) from exc


__all__ = ["Agent", "ensure_default_agent", "get_default_agent"]
