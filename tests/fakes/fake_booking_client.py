"""Fake in-memory do cliente Cal.com para testes deterministas."""

from __future__ import annotations

from typing import Any

from app.domain.booking import UpstreamResponse


class FakeBookingClient:
    """Implementa BookingClientProtocol sem IO.

    Registra cada chamada para que os testes confirmem se (e quantas
    vezes) o upstream foi acionado.
    """

    def __init__(
        self,
        response: UpstreamResponse | None = None,
        error: Exception | None = None,
    ) -> None:
        self._response = response or UpstreamResponse(status_code=200, body={"id": 1})
        self._error = error
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def create_booking(self, api_key: str, payload: dict[str, Any]) -> UpstreamResponse:
        self.calls.append((api_key, payload))
        if self._error is not None:
            raise self._error
        return self._response

    @property
    def last_payload(self) -> dict[str, Any]:
        assert self.calls, "create_booking não foi chamado"
        return self.calls[-1][1]
