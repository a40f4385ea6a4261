"""Bearer token extraction and verification for the post endpoints.

Reads are public, so DRF does not authenticate every request. Views pull the
raw token off the request with :func:`get_bearer_token` and the service layer
verifies it only for operations that mutate state.
"""

from typing import Optional

from authentication.services import Principal, TokenService

BEARER_PREFIX = "Bearer "


def get_bearer_token(request) -> Optional[str]:
    """Extract the Bearer token from Authorization header if present."""

    # DRF's Request wraps the original Django HttpRequest as ``._request``.
    django_request = getattr(request, "_request", request)
    auth_header = django_request.META.get("HTTP_AUTHORIZATION", "")
    if auth_header.startswith(BEARER_PREFIX):
        return auth_header[len(BEARER_PREFIX):].strip() or None
    return None


class BearerTokenAuthenticator:
    """Turn a bearer token into a :class:`Principal` or fail with 401."""

    def authenticate(self, token: Optional[str]) -> Principal:
        return TokenService.verify(token)


__all__ = ["BEARER_PREFIX", "BearerTokenAuthenticator", "get_bearer_token"]
