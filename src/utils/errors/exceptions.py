"""Exceções do adaptador de agendamento.

Cada exceção carrega o status HTTP e o texto público de erro que a rota
devolve ao chamador. Falhas fora desta hierarquia caem no handler genérico
da rota (500 "Server error").
"""

from __future__ import annotations

from typing import Any


API_KEY_NOT_CONFIGURED = "Cal.com API key not configured"


class BookingAdapterError(Exception):
    """Base para erros conhecidos do fluxo de agendamento."""

    status_code: int = 500

    def __init__(self, error: str, status_code: int | None = None) -> None:
        super().__init__(error)
        self.error = error
        if status_code is not None:
            self.status_code = status_code

    def to_body(self) -> dict[str, Any]:
        """Corpo JSON público do erro."""
        return {"error": self.error}


class MethodNotAllowedError(BookingAdapterError):
    """Método HTTP diferente de POST/OPTIONS."""

    status_code = 405

    def __init__(self, method: str) -> None:
        super().__init__("Method not allowed")
        self.method = method


class MalformedRequestError(BookingAdapterError):
    """Body inválido ou campo obrigatório ausente/inválido."""

    status_code = 400


class BookingValidationError(MalformedRequestError):
    """Falha de validação de um campo específico do agendamento."""

    def __init__(self, error: str, field: str) -> None:
        super().__init__(error)
        self.field = field


class ConfigurationError(BookingAdapterError):
    """Configuração obrigatória do servidor ausente (ex.: API key)."""

    status_code = 500


class UpstreamError(BookingAdapterError):
    """Cal.com respondeu com status não-2xx.

    O corpo da resposta upstream é repassado sem alterações.
    """

    def __init__(self, status_code: int, body: Any) -> None:
        super().__init__("upstream_error", status_code=status_code)
        self.body = body

    def to_body(self) -> Any:
        return self.body
