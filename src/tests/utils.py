"""Shared helpers for tests (seeding, user creation, in-memory stores)."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from authentication.managers import UserManager
from authentication.services import TokenService
from core.identifiers import new_identifier
from posts.stores import OWNER_PROJECTION, POST_FIELDS
from scripts.management.commands.seed_posts import SEED_POSTS, create_seed_posts

User = get_user_model()

MISSING_ID = "5a422a851b54a676234d17f7"


def create_user(username: str, password: str, **extra):
    """Create a user with a bcrypt-hashed password for tests."""

    return User.objects.create(
        username=username,
        password_hash=UserManager.hash_password(password),
        **extra,
    )


def auth_client(user) -> APIClient:
    """Return an APIClient carrying a fresh bearer token for ``user``."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {TokenService.generate_token(user)}")
    return client


def seed_posts(owner=None) -> List[str]:
    """Insert the sample posts via the same helper the seed command uses."""
    return create_seed_posts(owner=owner)


class FakeUserStore:
    """In-memory user store recording every call made to it."""

    def __init__(self, users: Optional[List[Dict[str, Any]]] = None):
        self._users: Dict[str, Dict[str, Any]] = {u["id"]: dict(u) for u in users or []}
        self.calls: List[str] = []

    def find_by_id(self, user_id: str):
        self.calls.append("find_by_id")
        user = self._users.get(user_id)
        return dict(user, posts=list(user["posts"])) if user else None

    def find_all(self):
        self.calls.append("find_all")
        return [dict(u) for u in self._users.values()]

    def append_post(self, user_id: str, post_id: str) -> None:
        self.calls.append("append_post")
        self._users[user_id]["posts"].append(post_id)


class FakePostStore:
    """In-memory post store mirroring :class:`posts.stores.PostStore`."""

    def __init__(self, users: Optional[FakeUserStore] = None):
        self._posts: Dict[str, Dict[str, Any]] = {}
        self._users = users
        self.calls: List[str] = []

    def _project(self, doc, owner_fields):
        doc = dict(doc)
        if owner_fields is not None and doc["owner"] is not None and self._users is not None:
            owner = self._users._users[doc["owner"]]
            doc["owner"] = {field: owner[field] for field in owner_fields}
        return doc

    def insert(self, doc):
        self.calls.append("insert")
        post_id = new_identifier()
        self._posts[post_id] = {"id": post_id, **{f: doc.get(f) for f in POST_FIELDS if f != "id"}}
        self._posts[post_id]["owner"] = doc.get("owner")
        return post_id

    def find_by_id(self, post_id, owner_fields=None):
        self.calls.append("find_by_id")
        doc = self._posts.get(post_id)
        return self._project(doc, owner_fields) if doc else None

    def find_all(self, owner_fields=OWNER_PROJECTION):
        self.calls.append("find_all")
        return [self._project(doc, owner_fields) for doc in self._posts.values()]

    def update_by_id(self, post_id, patch, owner_fields=OWNER_PROJECTION):
        self.calls.append("update_by_id")
        if post_id not in self._posts:
            return None
        self._posts[post_id].update(patch)
        return self._project(self._posts[post_id], owner_fields)

    def delete_by_id(self, post_id):
        self.calls.append("delete_by_id")
        self._posts.pop(post_id, None)

    def raw(self, post_id):
        """Stored document without recording a call."""
        return self._posts.get(post_id)


__all__ = [
    "FakePostStore",
    "FakeUserStore",
    "MISSING_ID",
    "SEED_POSTS",
    "auth_client",
    "create_user",
    "seed_posts",
]
