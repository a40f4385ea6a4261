"""Response helpers and base classes for consistent API envelopes."""

from typing import Any

from rest_framework import status as http_status
from rest_framework.response import Response
from rest_framework.views import APIView


def api_response(data: Any, status: int = http_status.HTTP_200_OK) -> Response:
    """Return data wrapped in the standard envelope.

    All successful JSON responses should use this helper to ensure the
    `{ "data": ..., "errors": [] }` shape.
    """

    return Response({"data": data, "errors": []}, status=status)


def no_content() -> Response:
    # 204 responses must not include a body.
    return Response(status=http_status.HTTP_204_NO_CONTENT)


class BaseAPIView(APIView):
    """APIView without authenticators; views authenticate through their service."""

    authentication_classes: list[Any] = []
    permission_classes: list[Any] = []


__all__ = ["BaseAPIView", "api_response", "no_content"]
