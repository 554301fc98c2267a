"""Configuração do pytest para o projeto message_dispatch."""

import logging
import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from app.domain.agent import get_default_agent  # noqa: E402
from config.settings import get_messaging_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_caches():
    """Isola settings e Agent padrão entre testes."""
    get_messaging_settings.cache_clear()
    get_default_agent.cache_clear()
    yield
    get_messaging_settings.cache_clear()
    get_default_agent.cache_clear()


@pytest.fixture
def restore_root_logging():
    """Restaura handlers/nível do root logger após configure_logging."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)
