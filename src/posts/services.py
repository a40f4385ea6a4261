"""Post service: validation, authentication and ownership around the stores.

Create writes two documents (the post, then the owner's post list) without a
transaction. If the second write fails the post stays, owned by a user whose
list does not mention it. Delete does not prune the owner's list either.
Both gaps are accepted; readers of ``User.posts`` must tolerate stale ids.
"""

import logging
from typing import Any, Mapping, Optional

from rest_framework.exceptions import AuthenticationFailed, NotFound, PermissionDenied, ValidationError

from authentication.services import Principal
from authentication.stores import UserStore
from core.authentication import BearerTokenAuthenticator
from core.identifiers import is_valid_identifier
from .serializers import PostPayload
from .stores import OWNER_PROJECTION, PostStore

logger = logging.getLogger(__name__)

INVALID_ID_MESSAGE = "invalid id"
FORBIDDEN_DELETE_MESSAGE = "only the creator can delete"


def ensure_valid_id(post_id: Any) -> str:
    """Reject malformed identifiers before they reach a store.

    Stores hold lowercase identifiers, so the accepted value is lowercased.
    """
    if not is_valid_identifier(post_id):
        raise ValidationError(INVALID_ID_MESSAGE)
    return post_id.lower()


class PostService:
    """The five post operations exposed to the HTTP layer."""

    def __init__(
        self,
        posts: Optional[PostStore] = None,
        users: Optional[UserStore] = None,
        authenticator: Optional[BearerTokenAuthenticator] = None,
    ):
        self.posts = posts if posts is not None else PostStore()
        self.users = users if users is not None else UserStore()
        self.authenticator = authenticator if authenticator is not None else BearerTokenAuthenticator()

    def list(self) -> list[dict[str, Any]]:
        return self.posts.find_all(owner_fields=OWNER_PROJECTION)

    def get(self, post_id: Any) -> dict[str, Any]:
        post_id = ensure_valid_id(post_id)
        post = self.posts.find_by_id(post_id, owner_fields=OWNER_PROJECTION)
        if post is None:
            raise NotFound("post not found")
        return post

    def create(self, payload: Mapping[str, Any], token: Optional[str]) -> dict[str, Any]:
        """Insert a post owned by the token's user and record it on that user.

        The token is checked before the payload.
        """
        principal = self.authenticator.authenticate(token)
        data = PostPayload.from_data(payload)

        user = self.users.find_by_id(principal.user_id)
        if user is None or not user["is_active"]:
            raise AuthenticationFailed("User not found or inactive")

        document = data.as_document(owner=user["id"])
        post_id = self.posts.insert(document)
        self.users.append_post(user["id"], post_id)
        logger.info("User %s created post %s", user["id"], post_id)

        owner = {field: user[field] for field in OWNER_PROJECTION}
        return {"id": post_id, **document, "owner": owner}

    def update(self, post_id: Any, payload: Mapping[str, Any]) -> Optional[dict[str, Any]]:
        """Replace title, url and likes; a miss returns None rather than raising."""
        post_id = ensure_valid_id(post_id)
        data = PostPayload.from_data(payload)

        post = self.posts.update_by_id(post_id, data.as_replacement(), owner_fields=OWNER_PROJECTION)
        if post is None:
            logger.info("Update of missing post %s ignored", post_id)
        else:
            logger.info("Post %s updated", post_id)
        return post

    def delete(self, post_id: Any, token: Optional[str]) -> None:
        """Delete a post if the caller owns it; absent posts are a no-op."""
        principal = self.authenticator.authenticate(token)
        post_id = ensure_valid_id(post_id)

        post = self.posts.find_by_id(post_id)
        if post is None:
            return

        self.check_owner(post, principal)
        self.posts.delete_by_id(post_id)
        logger.info("User %s deleted post %s", principal.user_id, post_id)

    @staticmethod
    def check_owner(post: Mapping[str, Any], principal: Principal) -> None:
        owner = post.get("owner")
        if owner is not None and str(owner) != principal.user_id:
            logger.warning(
                "User %s tried to delete post %s owned by %s", principal.user_id, post["id"], owner
            )
            raise PermissionDenied(FORBIDDEN_DELETE_MESSAGE)


__all__ = ["FORBIDDEN_DELETE_MESSAGE", "INVALID_ID_MESSAGE", "PostService", "ensure_valid_id"]
