"""Configuração do pytest para o projeto contact_validators."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture
def clean_settings_cache():
    """Limpa o cache de settings antes e depois do teste."""
    from contact_validators.config.settings import get_validator_settings

    get_validator_settings.cache_clear()
    yield
    get_validator_settings.cache_clear()
