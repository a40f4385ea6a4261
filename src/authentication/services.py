"""Token service for JWT issuance and verification."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from django.conf import settings
from rest_framework.exceptions import AuthenticationFailed


@dataclass(frozen=True)
class Principal:
    """Identity derived from a verified token for the span of one request."""

    user_id: str
    username: str | None = None


class TokenService:
    """Handle JWT issuance and decoding with the process-wide secret."""

    ALGORITHM = "HS256"

    @classmethod
    def generate_token(cls, user) -> str:
        """Issue a signed token carrying the user's id and username."""

        now = datetime.now(timezone.utc)
        ttl = timedelta(seconds=getattr(settings, "TOKEN_TTL_SECONDS", 3600))
        payload = {
            "id": str(user.id),
            "username": user.username,
            "iat": int(now.timestamp()),
            "exp": int((now + ttl).timestamp()),
        }
        return jwt.encode(payload, settings.SECRET_KEY, algorithm=cls.ALGORITHM)

    @classmethod
    def decode_token(cls, token: str) -> dict[str, Any]:
        """Verify the signature and expiry of a JWT and return its claims."""

        try:
            return jwt.decode(token, settings.SECRET_KEY, algorithms=[cls.ALGORITHM])
        except jwt.ExpiredSignatureError as exc:
            raise AuthenticationFailed("Token has expired") from exc
        except jwt.InvalidTokenError as exc:
            raise AuthenticationFailed("Invalid token") from exc

    @classmethod
    def verify(cls, token: str | None) -> Principal:
        """Turn a raw bearer token into a :class:`Principal`.

        A missing token is reported the same way as a malformed one.
        """

        if not token:
            raise AuthenticationFailed("Invalid token")

        claims = cls.decode_token(token)
        user_id = claims.get("id")
        if not user_id:
            raise AuthenticationFailed("Invalid token")
        return Principal(user_id=str(user_id), username=claims.get("username"))


__all__ = ["Principal", "TokenService"]
