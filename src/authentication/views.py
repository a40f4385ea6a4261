"""User and login endpoints."""

from typing import Any

from drf_spectacular.utils import extend_schema
from rest_framework import status

from core.response import BaseAPIView, api_response
from posts.stores import PostStore
from .serializers import (
    LoginResponseSerializer,
    LoginSerializer,
    RegisterSerializer,
    UserDetailSerializer,
)
from .services import TokenService
from .stores import UserStore


class UserListView(BaseAPIView):
    @extend_schema(responses=UserDetailSerializer(many=True), auth=[])
    def get(self, request):
        """List users with their recorded posts expanded.

        Ids left behind by deleted posts are skipped here but stay stored.
        """
        post_store = PostStore()
        users: list[dict[str, Any]] = []
        for user in UserStore().find_all():
            user["posts"] = post_store.find_many(user["posts"])
            users.append(UserDetailSerializer(user).data)
        return api_response(users)

    # noinspection PyMethodMayBeStatic
    @extend_schema(request=RegisterSerializer, responses={201: UserDetailSerializer}, auth=[])
    def post(self, request):
        """Register a new user and return their public profile."""
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        return api_response(UserDetailSerializer(user).data, status=status.HTTP_201_CREATED)


class LoginView(BaseAPIView):
    # noinspection PyMethodMayBeStatic
    @extend_schema(request=LoginSerializer, responses=LoginResponseSerializer, auth=[])
    def post(self, request):
        """Check credentials and issue a signed token."""
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]
        token = TokenService.generate_token(user)
        return api_response({"token": token, "username": user.username, "name": user.name})


__all__ = ["LoginView", "UserListView"]
