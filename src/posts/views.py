"""Post endpoints delegating to :class:`PostService`."""

from drf_spectacular.utils import extend_schema
from rest_framework import status

from core.authentication import get_bearer_token
from core.response import BaseAPIView, api_response, no_content
from .serializers import PostPayloadSerializer, PostSerializer
from .services import PostService


class PostServiceMixin:
    """Build a :class:`PostService` over the ORM-backed stores."""

    service_class = PostService

    def get_service(self) -> PostService:
        return self.service_class()


class PostListView(PostServiceMixin, BaseAPIView):
    @extend_schema(responses=PostSerializer(many=True), auth=[])
    def get(self, request):
        """List every post with its owner reduced to id/username/name."""
        return api_response(self.get_service().list())

    @extend_schema(request=PostPayloadSerializer, responses={201: PostSerializer})
    def post(self, request):
        """Create a post owned by the authenticated user."""
        post = self.get_service().create(request.data, get_bearer_token(request))
        return api_response(post, status=status.HTTP_201_CREATED)


class PostDetailView(PostServiceMixin, BaseAPIView):
    @extend_schema(responses=PostSerializer, auth=[])
    def get(self, request, post_id):
        return api_response(self.get_service().get(post_id))

    @extend_schema(request=PostPayloadSerializer, responses=PostSerializer, auth=[])
    def put(self, request, post_id):
        """Replace title/url/likes; ``data`` is null when nothing matched."""
        return api_response(self.get_service().update(post_id, request.data))

    @extend_schema(responses={204: None})
    def delete(self, request, post_id):
        """Delete an owned post; deleting a missing post also answers 204."""
        self.get_service().delete(post_id, get_bearer_token(request))
        return no_content()


__all__ = ["PostDetailView", "PostListView"]
