"""Custom exception handling to enforce the API error envelope."""

import logging
from typing import Any

from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from articles.storage import DuplicateError
from .response import error_response

logger = logging.getLogger(__name__)


def _normalize_errors(payload: Any) -> list[Any]:
    """Convert DRF's response.data into a list for the envelope."""

    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and "detail" in payload:
        # Common DRF pattern: {"detail": "..."}
        return [payload["detail"]]
    return [payload]


def _view_name(context: dict[str, Any]) -> str:
    view = context.get("view")
    return type(view).__name__ if view is not None else "unknown view"


def custom_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """Wrap errors in `{ "data": null, "errors": [...] }` shape.

    - Uniqueness clashes raised by the storage layer become 400 field errors.
    - Database errors are logged and become a generic 500.
    - DRF's default handler covers validation (400) and NotFound (404).
    - Anything else is logged with its traceback and answered with a 500.
    """

    if isinstance(exc, DuplicateError):
        return error_response([{exc.field_name: [str(exc)]}], status.HTTP_400_BAD_REQUEST)

    # Store failures get the same generic 500 as any other fault, in the envelope
    # rather than Django's HTML error page.
    if isinstance(exc, DatabaseError):
        logger.exception("Database failure in %s", _view_name(context))
        return error_response(["Internal server error."], status.HTTP_500_INTERNAL_SERVER_ERROR)

    response = drf_exception_handler(exc, context)

    if response is None:
        logger.exception("Unhandled error in %s", _view_name(context), exc_info=exc)
        return error_response(["Internal server error."], status.HTTP_500_INTERNAL_SERVER_ERROR)

    # Successful responses are untouched here; BaseAPIView handles them.
    if response.status_code >= 400:
        response.data = {"data": None, "errors": _normalize_errors(response.data)}

    return response
