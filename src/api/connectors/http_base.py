"""Cliente HTTP base para conectores da camada API.

Uma tentativa por chamada: falhas de rede sobem como HttpError e não
há retry/backoff contra o upstream.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """Cliente HTTP assíncrono simples para chamadas externas.

    Args:
        config: Timeout, headers padrão e verificação SSL.
        transport: Transport httpx opcional (ex: httpx.MockTransport em testes).
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._transport,
            ) as client:
                return await client.post(
                    url,
                    json=json,
                    headers=merged_headers,
                    params=params,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.HTTPError as exc:
            logger.warning(
                "http_request_failed",
                extra={"url": url, "error_type": type(exc).__name__},
            )
            raise HttpError(str(exc) or type(exc).__name__) from exc
