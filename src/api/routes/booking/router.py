"""Endpoint de webhook de agendamento (tool do agente de voz ElevenLabs).

Endpoint:
- OPTIONS /api/booking: preflight CORS, 200 sem corpo
- POST /api/booking: cria booking no Cal.com
- demais métodos: 405

Toda resposta leva os headers CORS permissivos e cada request produz
exatamente uma resposta: erros não previstos viram 500 "Server error".
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.connectors.elevenlabs import parse_booking_body
from app.bootstrap.booking_factory import create_booking_use_case
from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from config.settings import get_calcom_settings
from utils.errors import BookingAdapterError, MethodNotAllowedError

logger = logging.getLogger(__name__)

router = APIRouter()

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

BOOKING_PATH = "/api/booking"

# Métodos fora desta lista chegam como 405 do roteador; ver booking_http_exception_handler
_ACCEPTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

SERVER_ERROR = "Server error"


def _get_booking_use_case():
    """Monta o use case por request (settings lidas no momento da chamada)."""
    return create_booking_use_case(get_calcom_settings())


def _json_response(content: Any, status_code: int) -> JSONResponse:
    return JSONResponse(content=content, status_code=status_code, headers=CORS_HEADERS)


@router.api_route("", methods=_ACCEPTED_METHODS, response_model=None)
async def booking_webhook(request: Request) -> Response:
    """Recebe o payload flat do agente e responde no formato do agente."""
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    try:
        return await _handle_booking_request(request)
    finally:
        reset_correlation_id(token)


async def _handle_booking_request(request: Request) -> Response:
    try:
        return await _dispatch(request)
    except Exception as exc:
        logger.exception(
            "booking_processing_failed",
            extra={
                "channel": "elevenlabs",
                "correlation_id": get_correlation_id(),
                "error_type": type(exc).__name__,
            },
        )
        return _json_response(
            {"error": SERVER_ERROR, "details": str(exc)},
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


async def _dispatch(request: Request) -> Response:
    method = request.method.upper()

    if method == "OPTIONS":
        return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)

    try:
        if method != "POST":
            logger.info("booking_method_not_allowed", extra={"method": method})
            raise MethodNotAllowedError(method)

        raw_body = await request.body()
        logger.info(
            "booking_received",
            extra={
                "channel": "elevenlabs",
                "correlation_id": get_correlation_id(),
                "payload_size": len(raw_body),
            },
        )

        payload = parse_booking_body(raw_body)
        confirmation = await _get_booking_use_case().execute(payload)

    except BookingAdapterError as exc:
        # Serialização pode falhar (ex: NaN no corpo upstream); cai no 500 acima
        return _json_response(exc.to_body(), exc.status_code)

    response = _json_response(confirmation.to_body(), status.HTTP_200_OK)
    logger.info(
        "booking_completed",
        extra={"channel": "elevenlabs", "correlation_id": get_correlation_id()},
    )
    return response


async def booking_http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> Response:
    """405 do roteador em /api/booking no mesmo formato da rota.

    Métodos que não estão em _ACCEPTED_METHODS (TRACE, PROPFIND...) são
    rejeitados pelo Starlette antes do handler; demais HTTPException
    seguem o handler padrão do FastAPI.
    """
    if (
        exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        and request.url.path.rstrip("/") == BOOKING_PATH
    ):
        logger.info("booking_method_not_allowed", extra={"method": request.method})
        return _json_response(
            MethodNotAllowedError(request.method).to_body(),
            status.HTTP_405_METHOD_NOT_ALLOWED,
        )
    return await http_exception_handler(request, exc)
