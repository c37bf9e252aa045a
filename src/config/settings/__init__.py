"""Agregador de settings do serviço.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Cal.com settings
from config.settings.calcom import (
    CALCOM_API_BASE_URL,
    CALCOM_API_VERSION,
    CalComSettings,
    get_calcom_settings,
)

__all__ = [
    # Constants
    "CALCOM_API_BASE_URL",
    "CALCOM_API_VERSION",
    # Base
    "BaseSettings",
    # Cal.com
    "CalComSettings",
    "Environment",
    "get_base_settings",
    "get_calcom_settings",
]
