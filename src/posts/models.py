"""Post model: a shared link with an optional owning user."""

from django.conf import settings
from django.db import models

from core.identifiers import IDENTIFIER_LENGTH, new_identifier


class Post(models.Model):
    """Shared link with title/author/url/likes.

    ``owner`` is nullable: posts created before ownership existed stay legal
    and can be deleted by any authenticated user.
    """

    id = models.CharField(
        primary_key=True,
        max_length=IDENTIFIER_LENGTH,
        default=new_identifier,
        editable=False,
    )
    title = models.CharField(max_length=255)
    author = models.CharField(max_length=255, blank=True, null=True)
    url = models.CharField(max_length=2048)
    likes = models.PositiveIntegerField(default=0)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="owned_posts",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.title


__all__ = ["Post"]
