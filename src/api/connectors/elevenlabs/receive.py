"""Parse inicial do body enviado pela tool de agendamento do ElevenLabs."""

from __future__ import annotations

import json
import logging
from typing import Any

from utils.errors import MalformedRequestError

logger = logging.getLogger(__name__)

INVALID_REQUEST_BODY = "Invalid request body"


def parse_booking_body(raw_body: bytes) -> Any:
    """Decodifica o JSON do body (sem validar o formato do objeto).

    Raises:
        MalformedRequestError: Body vazio ou JSON inválido.
    """
    if not raw_body or not raw_body.strip():
        logger.warning("booking_body_empty")
        raise MalformedRequestError(INVALID_REQUEST_BODY)

    try:
        return json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning("booking_body_invalid_json", extra={"payload_size": len(raw_body)})
        raise MalformedRequestError(INVALID_REQUEST_BODY) from exc
