"""Testes do parse do body do webhook de agendamento."""

from __future__ import annotations

import pytest

from api.connectors.elevenlabs import INVALID_REQUEST_BODY, parse_booking_body
from utils.errors import MalformedRequestError


def test_parses_json_object() -> None:
    assert parse_booking_body(b'{"start": "2025-01-15T10:00:00.000Z"}') == {
        "start": "2025-01-15T10:00:00.000Z"
    }


def test_non_object_json_is_returned_for_normalizer_to_reject() -> None:
    assert parse_booking_body(b"[1, 2]") == [1, 2]
    assert parse_booking_body(b"null") is None


@pytest.mark.parametrize("raw_body", [b"", b"   ", b"{not json", b"\xff\xfe"])
def test_empty_or_invalid_body_is_malformed(raw_body: bytes) -> None:
    with pytest.raises(MalformedRequestError) as exc_info:
        parse_booking_body(raw_body)

    assert exc_info.value.error == INVALID_REQUEST_BODY
    assert exc_info.value.status_code == 400
