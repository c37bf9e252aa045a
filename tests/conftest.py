"""Configuração do pytest para o booking bridge."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import CalComSettings, get_base_settings, get_calcom_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings são lru_cache; cada teste lê o ambiente do zero."""
    get_base_settings.cache_clear()
    get_calcom_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_calcom_settings.cache_clear()


@pytest.fixture
def calcom_settings() -> CalComSettings:
    """Settings com API key de teste e defaults de negócio."""
    return CalComSettings(api_key="test-api-key")
