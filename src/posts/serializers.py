"""Serializers for post payload validation and response documents."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from rest_framework import serializers

# Upper bound of the likes column on every supported database.
MAX_LIKES = 2147483647


class PostPayloadSerializer(serializers.Serializer):
    """Validate an incoming post body; title and url are mandatory."""

    title = serializers.CharField(max_length=255)
    url = serializers.CharField(max_length=2048)
    author = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    likes = serializers.IntegerField(min_value=0, max_value=MAX_LIKES, required=False)


@dataclass(frozen=True)
class PostPayload:
    """Validated post body.

    ``likes`` is None when the field was absent from the request, which is
    different from an explicit 0.
    """

    title: str
    url: str
    author: Optional[str] = None
    likes: Optional[int] = None

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> "PostPayload":
        """Validate ``data`` without touching it; raises ``ValidationError``."""
        serializer = PostPayloadSerializer(data=data)
        serializer.is_valid(raise_exception=True)
        return cls(**serializer.validated_data)

    @property
    def likes_or_default(self) -> int:
        return 0 if self.likes is None else self.likes

    def as_document(self, owner: Optional[str] = None) -> dict[str, Any]:
        """Fields for a newly inserted post."""
        return {
            "title": self.title,
            "author": self.author,
            "url": self.url,
            "likes": self.likes_or_default,
            "owner": owner,
        }

    def as_replacement(self) -> dict[str, Any]:
        """Fields overwritten by an update; author is left as stored."""
        return {
            "title": self.title,
            "url": self.url,
            "likes": self.likes_or_default,
        }


class OwnerSerializer(serializers.Serializer):
    id = serializers.CharField()
    username = serializers.CharField()
    name = serializers.CharField()


class PostSerializer(serializers.Serializer):
    """Post document as returned by the API (used for schema generation)."""

    id = serializers.CharField()
    title = serializers.CharField()
    author = serializers.CharField(allow_null=True)
    url = serializers.CharField()
    likes = serializers.IntegerField()
    owner = OwnerSerializer(allow_null=True)


__all__ = ["MAX_LIKES", "OwnerSerializer", "PostPayload", "PostPayloadSerializer", "PostSerializer"]
