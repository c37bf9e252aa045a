"""Normalizer ElevenLabs — payload flat da tool de agendamento.

Responsabilidades:
- Resolver cada campo por regras ordenadas de chaves (extractor)
- Aplicar defaults de negócio do Cal.com (normalizer)
"""

from .extractor import (
    EMAIL_RULE,
    LANGUAGE_RULE,
    NAME_RULE,
    PHONE_RULE,
    TIME_ZONE_RULE,
    FieldRule,
    extract_field,
    parse_event_type_id,
)
from .normalizer import ElevenLabsBookingNormalizer

__all__ = [
    "EMAIL_RULE",
    "LANGUAGE_RULE",
    "NAME_RULE",
    "PHONE_RULE",
    "TIME_ZONE_RULE",
    "ElevenLabsBookingNormalizer",
    "FieldRule",
    "extract_field",
    "parse_event_type_id",
]
