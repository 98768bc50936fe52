"""DRF exception handler translating domain failures into HTTP responses.

Response shapes:
- ``EntityNotFound``  -> 404 ``{status, message, timestamp}``
- ``InvalidState``    -> 400 ``{status, message, timestamp}``
- validation errors   -> 400 ``{field: message}``
- other API errors    -> their own status, ``{status, message, timestamp}``
- anything else       -> 500 with a generic message; the original error is
  logged server-side and never returned to the client.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.core.exceptions import ValidationError as DjangoValidationError
from django.utils import timezone
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from modules.core.exceptions import EntityNotFound, InvalidState

logger = structlog.get_logger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."
NON_FIELD_ERRORS = "non_field_errors"


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Entry point registered as ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``."""
    view = context.get("view")
    log = logger.bind(view=type(view).__name__ if view else None)

    if isinstance(exc, EntityNotFound):
        log.info("api.not_found", message=str(exc))
        return error_response(status.HTTP_404_NOT_FOUND, str(exc))

    if isinstance(exc, InvalidState):
        log.info("api.invalid_state", message=str(exc))
        return error_response(status.HTTP_400_BAD_REQUEST, str(exc))

    field_errors = _validation_errors(exc)
    if field_errors is not None:
        log.info("api.validation_failed", fields=sorted(field_errors))
        set_rollback()
        return Response(field_errors, status=status.HTTP_400_BAD_REQUEST)

    response = exception_handler(exc, context)
    if response is not None:
        return error_response(
            response.status_code,
            _detail_message(response.data),
            headers=response.headers,
        )

    log.exception("api.unhandled_exception", exc_info=exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, UNEXPECTED_ERROR_MESSAGE
    )


def error_response(
    status_code: int, message: str, headers: Optional[Any] = None
) -> Response:
    """Build the standard ``{status, message, timestamp}`` error body."""
    set_rollback()
    body = {
        "status": status_code,
        "message": message,
        "timestamp": timezone.now().isoformat(),
    }
    response = Response(body, status=status_code)
    if headers:
        for name in ("Allow", "Retry-After", "WWW-Authenticate"):
            if name in headers:
                response[name] = headers[name]
    return response


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _validation_errors(exc: Exception) -> Optional[Dict[str, str]]:
    """Return a flat ``{field: message}`` map, or ``None`` if *exc* is not a
    validation failure."""
    if isinstance(exc, DRFValidationError):
        return flatten_errors(exc.detail)
    if isinstance(exc, PydanticValidationError):
        errors: Dict[str, str] = {}
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"]) or NON_FIELD_ERRORS
            errors.setdefault(field, error["msg"])
        return errors
    if isinstance(exc, DjangoValidationError):
        if hasattr(exc, "error_dict"):
            return flatten_errors(exc.message_dict)
        return flatten_errors(exc.messages)
    return None


def flatten_errors(detail: Any, prefix: str = "") -> Dict[str, str]:
    """Collapse nested DRF error details into ``{"items[0].quantity": msg}``.

    Only the first message of each field is kept.
    """
    if isinstance(detail, dict):
        errors: Dict[str, str] = {}
        for key, value in detail.items():
            name = f"{prefix}.{key}" if prefix else str(key)
            errors.update(flatten_errors(value, name))
        return errors

    if isinstance(detail, (list, tuple)):
        if not detail:
            return {}
        if all(not isinstance(value, (dict, list, tuple)) for value in detail):
            return {prefix or NON_FIELD_ERRORS: str(detail[0])}
        errors = {}
        for index, value in enumerate(detail):
            errors.update(flatten_errors(value, f"{prefix}[{index}]"))
        return errors

    return {prefix or NON_FIELD_ERRORS: str(detail)}


def _detail_message(data: Any) -> str:
    if isinstance(data, dict) and "detail" in data:
        return str(data["detail"])
    return str(data)
