"""Testes do CalComHttpClient com transport httpx em memória."""

from __future__ import annotations

import json

import httpx
import pytest

from api.connectors.calcom import CalComHttpClient, create_calcom_http_client
from api.connectors.http_base import HttpClientConfig, HttpError
from config.settings import CalComSettings
from utils.errors import ConfigurationError

ENDPOINT = "https://api.cal.com/v1/bookings"
PAYLOAD = {
    "eventTypeId": 3921180,
    "start": "2025-01-15T10:00:00.000Z",
    "timeZone": "Europe/Kiev",
    "language": "uk",
    "metadata": {},
    "responses": {"name": "Jane", "email": "jane@x.com"},
}


def _client(handler) -> tuple[CalComHttpClient, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def _record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    client = CalComHttpClient(
        bookings_endpoint=ENDPOINT,
        config=HttpClientConfig(timeout_seconds=5.0),
        transport=httpx.MockTransport(_record),
    )
    return client, seen


@pytest.mark.asyncio
async def test_create_booking_sends_single_post_with_api_key_query() -> None:
    client, seen = _client(lambda request: httpx.Response(200, json={"id": 42}))

    result = await client.create_booking("secret-key", PAYLOAD)

    assert result.status_code == 200
    assert result.body == {"id": 42}
    assert result.ok is True
    assert len(seen) == 1
    request = seen[0]
    assert request.method == "POST"
    assert request.url.scheme == "https"
    assert request.url.host == "api.cal.com"
    assert request.url.path == "/v1/bookings"
    assert request.url.params["apiKey"] == "secret-key"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == PAYLOAD


@pytest.mark.asyncio
async def test_non_2xx_is_returned_not_raised() -> None:
    client, seen = _client(lambda request: httpx.Response(409, json={"message": "conflict"}))

    result = await client.create_booking("secret-key", PAYLOAD)

    assert result.status_code == 409
    assert result.body == {"message": "conflict"}
    assert result.ok is False
    assert len(seen) == 1


@pytest.mark.asyncio
async def test_server_error_is_not_retried() -> None:
    client, seen = _client(lambda request: httpx.Response(503, json={"message": "down"}))

    result = await client.create_booking("secret-key", PAYLOAD)

    assert result.status_code == 503
    assert len(seen) == 1


@pytest.mark.asyncio
async def test_invalid_json_body_raises_http_error() -> None:
    client, _ = _client(lambda request: httpx.Response(502, text="<html>Bad gateway</html>"))

    with pytest.raises(HttpError) as exc_info:
        await client.create_booking("secret-key", PAYLOAD)

    assert exc_info.value.status_code == 502
    assert "Invalid JSON response from Cal.com" in str(exc_info.value)


@pytest.mark.asyncio
async def test_network_failure_raises_http_error() -> None:
    def _fail(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client, _ = _client(_fail)

    with pytest.raises(HttpError, match="connection refused"):
        await client.create_booking("secret-key", PAYLOAD)


@pytest.mark.asyncio
@pytest.mark.parametrize("api_key", ["", "   "])
async def test_empty_api_key_fails_without_request(api_key: str) -> None:
    client, seen = _client(lambda request: httpx.Response(200, json={}))

    with pytest.raises(ConfigurationError) as exc_info:
        await client.create_booking(api_key, PAYLOAD)

    assert exc_info.value.error == "Cal.com API key not configured"
    assert seen == []


def test_factory_uses_settings_endpoint() -> None:
    settings = CalComSettings(
        api_key="k",
        api_base_url="https://cal.internal/",
        api_version="v2",
        request_timeout_seconds=7.5,
    )

    client = create_calcom_http_client(settings)

    assert client.bookings_endpoint == "https://cal.internal/v2/bookings"
    assert client._config.timeout_seconds == 7.5
