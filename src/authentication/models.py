"""Custom User model using bcrypt-hashed passwords and a list of owned posts.

The ``posts`` column mirrors the ``Post.owner`` back-reference as an ordered
list of post identifiers. It is appended to after a post is created and is
never pruned, so it may contain identifiers of posts that were deleted since.
"""

from typing import ClassVar, Optional

from django.contrib.auth.models import AbstractBaseUser
from django.db import models

from core.identifiers import IDENTIFIER_LENGTH, new_identifier
from .managers import UserManager


class User(AbstractBaseUser):
    """Registered user identified by username."""

    id = models.CharField(
        primary_key=True,
        max_length=IDENTIFIER_LENGTH,
        default=new_identifier,
        editable=False,
    )
    username = models.CharField(max_length=150, unique=True)
    name = models.CharField(max_length=150, blank=True)
    password_hash = models.CharField(max_length=128)
    posts = models.JSONField(default=list, blank=True)
    is_active = models.BooleanField(default=True)
    date_joined = models.DateTimeField(auto_now_add=True)

    USERNAME_FIELD = "username"
    REQUIRED_FIELDS: ClassVar[list[str]] = ["name"]

    objects = UserManager()

    class Meta:
        """Oldest users first."""
        ordering = ["date_joined"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.username

    def set_password(self, raw_password: Optional[str]) -> None:  # type: ignore[override]
        """Override to ensure bcrypt hashing via manager utility."""

        if raw_password is None:
            self.password_hash = ""
        else:
            self.password_hash = UserManager.hash_password(raw_password)

    def check_password(self, raw_password: Optional[str]) -> bool:  # type: ignore[override]
        """Delegate to bcrypt verification helper."""

        if raw_password is None:
            return False
        return UserManager.verify_password(self, raw_password)


__all__ = ["User"]
