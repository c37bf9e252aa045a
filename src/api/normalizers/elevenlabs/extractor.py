"""Regras de extração de campos do payload flat do ElevenLabs.

Cada campo tem uma lista ordenada de chaves candidatas; a primeira com
valor utilizável vence. A ordem é parte do contrato e é testada por campo.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

NULL_LITERAL = "null"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


@dataclass(frozen=True, slots=True)
class FieldRule:
    """Regra de extração de um campo.

    Attributes:
        field: Nome do campo no schema Cal.com (para logs)
        keys: Chaves candidatas no payload, em ordem de precedência
        skip_null_literal: Trata a string "null" como ausente
        opt_out_key: Se esta chave vier explicitamente null/"null",
            o campo é omitido sem consultar as demais chaves
    """

    field: str
    keys: tuple[str, ...]
    skip_null_literal: bool = False
    opt_out_key: str | None = None


TIME_ZONE_RULE = FieldRule(field="timeZone", keys=("timeZone",))
LANGUAGE_RULE = FieldRule(field="language", keys=("language",))
NAME_RULE = FieldRule(field="responses.name", keys=("responses.name", "name"))
EMAIL_RULE = FieldRule(
    field="responses.email",
    keys=("responses.email", "email"),
    skip_null_literal=True,
)
# "responses.phon" é um typo da integração do agente de voz; mantido só por compatibilidade.
PHONE_RULE = FieldRule(
    field="responses.phone",
    keys=("responses.phone", "responses.phon", "phone"),
    opt_out_key="responses.phone",
)


def is_null_like(value: Any) -> bool:
    """True para None e para a string literal "null"."""
    return value is None or value == NULL_LITERAL


def as_text(value: Any) -> str | None:
    """Converte escalares em texto; vazio, bool e estruturas viram None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value or None
    if isinstance(value, int | float):
        return str(value)
    return None


def extract_field(payload: Mapping[str, Any], rule: FieldRule) -> str | None:
    """Aplica a regra e retorna o primeiro valor utilizável, ou None."""
    if rule.opt_out_key is not None and rule.opt_out_key in payload:
        if is_null_like(payload[rule.opt_out_key]):
            return None

    for key in rule.keys:
        text = as_text(payload.get(key))
        if text is None:
            continue
        if rule.skip_null_literal and text == NULL_LITERAL:
            continue
        return text
    return None


def parse_event_type_id(value: Any) -> int | None:
    """Converte o eventTypeId bruto em inteiro não nulo.

    Strings usam o inteiro inicial ("42abc" -> 42); floats são truncados.
    Zero e valores não numéricos retornam None; negativos são mantidos.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            return None
        parsed = int(value)
    elif isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match is None:
            return None
        parsed = int(match.group(1))
    else:
        return None
    return parsed if parsed != 0 else None
