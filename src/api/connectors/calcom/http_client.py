"""Cliente HTTP especializado para a API de bookings do Cal.com.

- Autenticação via query param `apiKey` (API v1)
- Uma única chamada por booking, sem retry
- Logging sem API key e sem dados do cliente
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from api.connectors.http_base import HttpClient, HttpClientConfig, HttpError
from app.domain.booking import UpstreamResponse
from config.settings import get_calcom_settings
from utils.errors import API_KEY_NOT_CONFIGURED, ConfigurationError

if TYPE_CHECKING:
    import httpx

    from config.settings import CalComSettings

logger: logging.Logger = logging.getLogger(__name__)


class CalComHttpClient(HttpClient):
    """Cliente HTTP para criação de bookings no Cal.com."""

    def __init__(
        self,
        bookings_endpoint: str,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(config, transport=transport)
        self.bookings_endpoint = bookings_endpoint

    async def create_booking(self, api_key: str, payload: dict[str, Any]) -> UpstreamResponse:
        """Cria booking no Cal.com.

        Args:
            api_key: Credencial do Cal.com
            payload: Corpo JSON no schema de bookings

        Returns:
            UpstreamResponse com status e corpo parseado (2xx ou não)

        Raises:
            ConfigurationError: Se api_key está vazia
            HttpError: Falha de rede ou corpo de resposta que não é JSON
        """
        if not api_key or not api_key.strip():
            logger.error(
                "calcom_api_key_missing",
                extra={"endpoint": self.bookings_endpoint},
            )
            raise ConfigurationError(API_KEY_NOT_CONFIGURED)

        started_at = time.perf_counter()
        response = await self.post(
            self.bookings_endpoint,
            json=payload,
            headers={"Content-Type": "application/json"},
            params={"apiKey": api_key},
        )
        latency_ms = round((time.perf_counter() - started_at) * 1000, 2)

        body = self._parse_body(response)
        logger.info(
            "calcom_response",
            extra={
                "endpoint": self.bookings_endpoint,
                "status_code": response.status_code,
                "latency_ms": latency_ms,
            },
        )
        return UpstreamResponse(status_code=response.status_code, body=body)

    def _parse_body(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            logger.error(
                "calcom_response_invalid_json",
                extra={
                    "endpoint": self.bookings_endpoint,
                    "status_code": response.status_code,
                },
            )
            raise HttpError(
                f"Invalid JSON response from Cal.com: {exc}",
                status_code=response.status_code,
            ) from exc


def create_calcom_http_client(
    settings: CalComSettings | None = None,
) -> CalComHttpClient:
    """Factory para criar cliente Cal.com com config padrão.

    Args:
        settings: CalComSettings opcional. Se None, carrega do ambiente.
    """
    calcom = settings or get_calcom_settings()
    config = HttpClientConfig(timeout_seconds=calcom.request_timeout_seconds)
    return CalComHttpClient(bookings_endpoint=calcom.bookings_endpoint, config=config)
