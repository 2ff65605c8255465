"""The `{data, errors}` envelope shared by every JSON endpoint."""

from typing import Any

from rest_framework import status as http_status
from rest_framework.response import Response
from rest_framework.views import APIView


def api_response(data: Any, status: int = http_status.HTTP_200_OK) -> Response:
    """Successful payload as `{ "data": ..., "errors": [] }`."""

    return Response({"data": data, "errors": []}, status=status)


def error_response(errors: list[Any], status: int) -> Response:
    """Failure as `{ "data": null, "errors": [...] }`."""

    return Response({"data": None, "errors": errors}, status=status)


def no_content() -> Response:
    """Empty 204 response; deletions never carry a body."""
    return Response(status=http_status.HTTP_204_NO_CONTENT)


def is_enveloped(payload: Any) -> bool:
    return isinstance(payload, dict) and set(payload) == {"data", "errors"}


class BaseAPIView(APIView):
    """APIView whose successful bodies always leave wrapped in the envelope.

    Views may return bare serializer data; ``finalize_response`` wraps it.
    Error bodies are shaped by ``core.exceptions.custom_exception_handler``.
    """

    permission_classes: list[Any] = []

    def finalize_response(self, request, response, *args, **kwargs):
        payload = getattr(response, "data", None)
        if (
            response.status_code < 400
            and response.status_code != http_status.HTTP_204_NO_CONTENT
            and not is_enveloped(payload)
        ):
            response.data = {"data": payload, "errors": []}
        return super().finalize_response(request, response, *args, **kwargs)


__all__ = ["BaseAPIView", "api_response", "error_response", "is_enveloped", "no_content"]
