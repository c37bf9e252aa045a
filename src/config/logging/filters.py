"""Filter que carimba service e correlation_id em cada record."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Enriquece records com o serviço e o id da requisição de booking.

    O getter normalmente é app.observability.get_correlation_id, lido do
    ContextVar da request em andamento. Um correlation_id passado em
    `extra` tem precedência. Nenhum record é descartado.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._correlation_id_getter = correlation_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            getter = self._correlation_id_getter
            record.correlation_id = getter() if getter is not None else ""
        record.service = self._service_name
        return True
