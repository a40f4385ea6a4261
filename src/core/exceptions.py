"""Custom exception handling to enforce the API error envelope."""

import logging
from typing import Any

from django.conf import settings
from django.core.exceptions import ObjectDoesNotExist
from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed, NotAuthenticated
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)

ERROR_KINDS = {
    status.HTTP_400_BAD_REQUEST: "bad_request",
    status.HTTP_401_UNAUTHORIZED: "unauthorized",
    status.HTTP_403_FORBIDDEN: "forbidden",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "internal",
}

UNAUTHORIZED_MESSAGE = "Authentication credentials were not provided or are invalid."
INTERNAL_MESSAGE = "Internal server error."


def error_kind(status_code: int) -> str:
    """Map an HTTP status onto the error taxonomy used in envelopes."""

    if status_code in ERROR_KINDS:
        return ERROR_KINDS[status_code]
    return "internal" if status_code >= 500 else "bad_request"


def error_envelope(errors: list[Any], status_code: int) -> dict[str, Any]:
    return {"data": None, "errors": errors, "kind": error_kind(status_code)}


def _normalize_errors(payload: Any) -> list[Any]:
    """Convert DRF's response.data into a list for the envelope."""

    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and "detail" in payload:
        # Common DRF pattern: {"detail": "..."}
        return [payload["detail"]]
    return [payload]


def custom_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """Wrap DRF errors in `{ "data": null, "errors": [...], "kind": ... }` shape.

    - Uses DRF's default handler to produce the base response.
    - Store failures become 500 ``internal`` errors and are never retried.
    - Optionally exposes more detailed auth errors when DEBUG_AUTH_ERRORS is enabled.
    """

    if isinstance(exc, (DatabaseError, ObjectDoesNotExist)):
        logger.exception("Store failure while handling %s", context.get("view").__class__.__name__)
        return Response(
            error_envelope([INTERNAL_MESSAGE], status.HTTP_500_INTERNAL_SERVER_ERROR),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    response = drf_exception_handler(exc, context)

    if response is None:
        return response

    # DRF answers 403 for NotAuthenticated when no authenticator supplies a
    # WWW-Authenticate header; this API always uses 401.
    if isinstance(exc, (AuthenticationFailed, NotAuthenticated)):
        response.status_code = status.HTTP_401_UNAUTHORIZED

    if response.status_code >= 400:
        base_errors = response.data

        if response.status_code == status.HTTP_401_UNAUTHORIZED:
            if getattr(settings, "DEBUG_AUTH_ERRORS", False):
                # Surface the specific message (e.g. "Token has expired").
                errors = _normalize_errors(base_errors)
            else:
                errors = [UNAUTHORIZED_MESSAGE]
        else:
            errors = _normalize_errors(base_errors)

        response.data = error_envelope(errors, response.status_code)

    return response


__all__ = ["custom_exception_handler", "error_envelope", "error_kind"]
