"""Document-style access to posts on top of the Django ORM.

The service layer works with plain dicts; each method here is a single ORM
statement and therefore atomic per document.
"""

from typing import Any, Iterable, Optional, Sequence

from .models import Post

OWNER_PROJECTION = ("id", "username", "name")
POST_FIELDS = ("id", "title", "author", "url", "likes")


def _to_document(post: Post, owner_fields: Optional[Sequence[str]]) -> dict[str, Any]:
    doc = {field: getattr(post, field) for field in POST_FIELDS}
    if owner_fields is None:
        doc["owner"] = post.owner_id
    elif post.owner_id is None:
        doc["owner"] = None
    else:
        doc["owner"] = {field: getattr(post.owner, field) for field in owner_fields}
    return doc


class PostStore:
    """Insert, fetch, update and delete posts as dicts."""

    model = Post

    def insert(self, doc: dict[str, Any]) -> str:
        """Persist a new post and return its store-assigned id."""
        post = self.model.objects.create(
            title=doc["title"],
            author=doc.get("author"),
            url=doc["url"],
            likes=doc.get("likes", 0),
            owner_id=doc.get("owner"),
        )
        return post.pk

    def find_by_id(
        self, post_id: str, owner_fields: Optional[Sequence[str]] = None
    ) -> Optional[dict[str, Any]]:
        """Return the post with ``post_id``, or None.

        With ``owner_fields`` the owner is expanded to just those fields,
        otherwise it is the raw owner id.
        """
        post = self.model.objects.select_related("owner").filter(pk=post_id).first()
        if post is None:
            return None
        return _to_document(post, owner_fields)

    def find_all(self, owner_fields: Optional[Sequence[str]] = OWNER_PROJECTION) -> list[dict[str, Any]]:
        posts = self.model.objects.select_related("owner").all()
        return [_to_document(post, owner_fields) for post in posts]

    def find_many(self, post_ids: Iterable[str]) -> list[dict[str, Any]]:
        """Return posts for the given ids in the order given, skipping missing ones."""
        ids = list(post_ids)
        by_id = {post.pk: post for post in self.model.objects.filter(pk__in=ids)}
        return [{field: getattr(by_id[pk], field) for field in POST_FIELDS} for pk in ids if pk in by_id]

    def update_by_id(
        self,
        post_id: str,
        patch: dict[str, Any],
        owner_fields: Optional[Sequence[str]] = OWNER_PROJECTION,
    ) -> Optional[dict[str, Any]]:
        """Apply ``patch`` to one post; return the updated post or None on miss."""
        updated = self.model.objects.filter(pk=post_id).update(**patch)
        if not updated:
            return None
        return self.find_by_id(post_id, owner_fields=owner_fields)

    def delete_by_id(self, post_id: str) -> None:
        self.model.objects.filter(pk=post_id).delete()


__all__ = ["OWNER_PROJECTION", "POST_FIELDS", "PostStore"]
