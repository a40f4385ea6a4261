"""Document-style access to users for the post service."""

from typing import Any, Optional

from django.contrib.auth import get_user_model

USER_FIELDS = ("id", "username", "name", "posts", "is_active")


def _to_document(user) -> dict[str, Any]:
    doc = {field: getattr(user, field) for field in USER_FIELDS}
    doc["posts"] = list(doc["posts"] or [])
    return doc


class UserStore:
    """Fetch users and record post ownership on them."""

    @property
    def model(self):
        return get_user_model()

    def find_by_id(self, user_id: str) -> Optional[dict[str, Any]]:
        user = self.model.objects.filter(pk=user_id).first()
        if user is None:
            return None
        return _to_document(user)

    def find_all(self) -> list[dict[str, Any]]:
        return [_to_document(user) for user in self.model.objects.all()]

    def append_post(self, user_id: str, post_id: str) -> None:
        """Append ``post_id`` to the user's post list and save the user.

        Read-modify-write on one row; concurrent appends for the same user
        are not serialized.
        """
        user = self.model.objects.get(pk=user_id)
        user.posts = [*(user.posts or []), post_id]
        user.save(update_fields=["posts"])


__all__ = ["USER_FIELDS", "UserStore"]
