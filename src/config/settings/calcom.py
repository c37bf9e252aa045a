"""Settings de integração com Cal.com.

Inclui os defaults de negócio aplicados quando o agente de voz não envia
o campo (event type, timezone, idioma e email de contato).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da API Cal.com
CALCOM_API_BASE_URL: str = "https://api.cal.com"
CALCOM_API_VERSION: str = "v1"

# Defaults de negócio
DEFAULT_EVENT_TYPE_ID: int = 3921180
DEFAULT_TIME_ZONE: str = "Europe/Kiev"
DEFAULT_LANGUAGE: str = "uk"
DEFAULT_FALLBACK_EMAIL: str = "appointments@dental-clinic.com"


@dataclass(frozen=True)
class CalComSettings:
    """Configurações da API de bookings do Cal.com.

    Attributes:
        api_key: Credencial enviada como query param `apiKey`
        api_base_url: URL base da API
        api_version: Versão da API (ex: v1)
        request_timeout_seconds: Timeout da chamada upstream
        default_event_type_id: Event type usado quando o payload não traz um válido
        default_time_zone: Timezone usado quando ausente no payload
        default_language: Idioma usado quando ausente no payload
        fallback_email: Email de contato quando o cliente não informa email
    """

    # Credenciais
    api_key: str = ""

    # API
    api_base_url: str = CALCOM_API_BASE_URL
    api_version: str = CALCOM_API_VERSION
    request_timeout_seconds: float = 30.0

    # Defaults de negócio
    default_event_type_id: int = DEFAULT_EVENT_TYPE_ID
    default_time_zone: str = DEFAULT_TIME_ZONE
    default_language: str = DEFAULT_LANGUAGE
    fallback_email: str = DEFAULT_FALLBACK_EMAIL

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url.rstrip('/')}/{self.api_version}"

    @property
    def bookings_endpoint(self) -> str:
        """URL do endpoint de criação de bookings (sem query string)."""
        return f"{self.api_endpoint}/bookings"

    @property
    def has_api_key(self) -> bool:
        """Retorna True se a API key está configurada."""
        return bool(self.api_key and self.api_key.strip())

    def validate(self) -> list[str]:
        """Valida configurações estruturais do Cal.com.

        A ausência de CALCOM_API_KEY não entra aqui: ela é tratada por
        requisição como erro de configuração do servidor.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_base_url:
            errors.append("CALCOM_API_BASE_URL não pode ser vazio")

        if not self.api_version:
            errors.append("CALCOM_API_VERSION não pode ser vazio")

        if self.request_timeout_seconds <= 0:
            errors.append("CALCOM_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.default_event_type_id <= 0:
            errors.append("CALCOM_DEFAULT_EVENT_TYPE_ID deve ser > 0")

        if not self.default_time_zone.strip():
            errors.append("CALCOM_DEFAULT_TIME_ZONE não pode ser vazio")

        if "@" not in self.fallback_email:
            errors.append("CALCOM_FALLBACK_EMAIL inválido")

        return errors


def _load_from_env() -> CalComSettings:
    """Carrega CalComSettings a partir de variáveis de ambiente."""
    return CalComSettings(
        api_key=os.getenv("CALCOM_API_KEY", ""),
        api_base_url=os.getenv("CALCOM_API_BASE_URL", CALCOM_API_BASE_URL),
        api_version=os.getenv("CALCOM_API_VERSION", CALCOM_API_VERSION),
        request_timeout_seconds=float(os.getenv("CALCOM_REQUEST_TIMEOUT_SECONDS", "30")),
        default_event_type_id=int(
            os.getenv("CALCOM_DEFAULT_EVENT_TYPE_ID", str(DEFAULT_EVENT_TYPE_ID))
        ),
        default_time_zone=os.getenv("CALCOM_DEFAULT_TIME_ZONE", DEFAULT_TIME_ZONE),
        default_language=os.getenv("CALCOM_DEFAULT_LANGUAGE", DEFAULT_LANGUAGE),
        fallback_email=os.getenv("CALCOM_FALLBACK_EMAIL", DEFAULT_FALLBACK_EMAIL),
    )


@lru_cache(maxsize=1)
def get_calcom_settings() -> CalComSettings:
    """Retorna instância cacheada de CalComSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
