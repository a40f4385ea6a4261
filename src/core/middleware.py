"""Request logging middleware."""

import json
import logging

from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)

MASKED_FIELDS = frozenset({"password"})


def _describe_body(request) -> str:
    """Return the JSON body with sensitive fields masked, or '-'."""

    if not request.body or request.content_type != "application/json":
        return "-"
    try:
        payload = json.loads(request.body)
    except ValueError:
        return "<invalid json>"
    if isinstance(payload, dict):
        payload = {key: "***" if key in MASKED_FIELDS else value for key, value in payload.items()}
    return json.dumps(payload)


class RequestLoggerMiddleware(MiddlewareMixin):
    """Log method, path, status and body of every request."""

    def process_request(self, request):  # type: ignore[override]
        # The body must be read before DRF consumes the stream.
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s %s body: %s", request.method, request.path, _describe_body(request))

    def process_response(self, request, response):  # type: ignore[override]
        logger.info("%s %s %s", request.method, request.path, response.status_code)
        return response


__all__ = ["RequestLoggerMiddleware"]
