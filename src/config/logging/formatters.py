"""Formatters dos logs do booking bridge.

JSON em produção (um objeto por linha, pronto para o coletor) e texto
em uma linha para desenvolvimento local. Ambos esperam `service` e
`correlation_id` no record, injetados pelo CorrelationIdFilter.
"""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

# Ordem de saída dos campos no JSON
JSON_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "service",
    "correlation_id",
    "message",
)

_JSON_FIELD_NAMES = {"levelname": "level", "name": "logger"}

TEXT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(service)s %(correlation_id)s] %(name)s: %(message)s"


def create_json_formatter() -> JsonFormatter:
    """Formatter JSON; `levelname`/`name` saem como `level`/`logger`.

    Campos de `extra` (status_code, latency_ms, field...) entram no
    mesmo objeto.
    """
    return JsonFormatter(
        " ".join(f"%({field})s" for field in JSON_LOG_FIELDS),
        rename_fields=_JSON_FIELD_NAMES,
    )


def create_text_formatter() -> logging.Formatter:
    return logging.Formatter(TEXT_LOG_FORMAT)
