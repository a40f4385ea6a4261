"""Fallback views returning the JSON error envelope."""

from django.http import JsonResponse
from rest_framework import status

from .exceptions import INTERNAL_MESSAGE, error_envelope


def unknown_endpoint(request, exception=None):
    return JsonResponse(
        error_envelope(["unknown endpoint"], status.HTTP_404_NOT_FOUND),
        status=status.HTTP_404_NOT_FOUND,
    )


def server_error(request):
    return JsonResponse(
        error_envelope([INTERNAL_MESSAGE], status.HTTP_500_INTERNAL_SERVER_ERROR),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


__all__ = ["server_error", "unknown_endpoint"]
