"""Mapping of domain errors to HTTP responses.

This is the single place where failures become responses. Domain errors keep
their code, message and details; anything unexpected is logged and reported
as an opaque INTERNAL_ERROR.
"""

import structlog
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, NotFound, ParseError, ValidationError
from rest_framework.response import Response

from venues.domain.errors import DomainError, ErrorCode, InternalError

logger = structlog.get_logger(__name__)

ERROR_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.VENUE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CAPACITY_EXCEEDED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.DATES_UNAVAILABLE: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_STATUS_TRANSITION: status.HTTP_409_CONFLICT,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_body(code: str, message: str, details=None) -> dict:
    error = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {"error": error}


def domain_error_response(error: DomainError) -> Response:
    return Response(
        error_body(error.code.value, error.message, error.details),
        status=ERROR_STATUS[error.code],
    )


def exception_handler(exc: Exception, context: dict) -> Response:
    """DRF EXCEPTION_HANDLER producing the {"error": {...}} envelope."""
    if isinstance(exc, DomainError):
        return domain_error_response(exc)

    if isinstance(exc, Http404):
        exc = NotFound()

    if isinstance(exc, (ValidationError, ParseError)):
        return Response(
            error_body(ErrorCode.VALIDATION_ERROR.value, "Invalid request", exc.detail),
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, APIException):
        return Response(
            error_body(str(exc.default_code).upper(), str(exc.detail)),
            status=exc.status_code,
        )

    view = context.get("view")
    logger.error(
        "unhandled_exception",
        view=type(view).__name__ if view is not None else None,
        exc_info=exc,
    )
    return domain_error_response(InternalError())
