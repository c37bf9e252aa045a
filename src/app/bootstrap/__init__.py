"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging e conecta
implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, create_booking_use_case

    initialize_app()
    use_case = create_booking_use_case()
"""

from __future__ import annotations

import logging

from app.bootstrap.booking_factory import create_booking_use_case
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_calcom_settings

# Nome do serviço para logs
SERVICE_NAME = "calcom_booking_bridge"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com logging JSON e correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
        json_output=not base.debug,
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido em erro estrutural.
    CALCOM_API_KEY ausente só gera alerta: cada request responde 500
    de configuração enquanto a chave não existir.
    """
    base = get_base_settings()
    calcom = get_calcom_settings()
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"calcom: {error}" for error in calcom.validate())

    if not calcom.has_api_key:
        logger.warning(
            "calcom_api_key_missing",
            extra={"component": "bootstrap", "environment": base.environment},
        )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


__all__ = [
    "SERVICE_NAME",
    "create_booking_use_case",
    "initialize_app",
    "validate_runtime_settings",
]
