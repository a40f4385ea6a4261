"""Serializers for user registration, login and user listings."""

from typing import cast

from django.contrib.auth import get_user_model
from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed

from .managers import UserManager

User = get_user_model()


class RegisterSerializer(serializers.Serializer):
    """Validate and create a user with a bcrypt-hashed password."""

    username = serializers.CharField(min_length=3, max_length=150)
    name = serializers.CharField(required=False, allow_blank=True, max_length=150)
    password = serializers.CharField(write_only=True, min_length=3)

    @staticmethod
    def validate_username(value):
        """Ensure username is unique before creation."""
        if User.objects.filter(username=value).exists():
            raise serializers.ValidationError("username must be unique")
        return value

    def create(self, validated_data):
        manager = cast(UserManager, User.objects)
        return manager.create_user(**validated_data)


class LoginSerializer(serializers.Serializer):
    """Authenticate a user via username/password using bcrypt verification."""

    username = serializers.CharField()
    password = serializers.CharField(write_only=True)

    def validate(self, attrs):
        """Authenticate credentials and attach the user to validated_data."""
        try:
            user = User.objects.get(username=attrs.get("username"))
        except User.DoesNotExist:
            raise AuthenticationFailed("invalid username or password")

        if not user.is_active:
            raise AuthenticationFailed("User is inactive")

        if not UserManager.verify_password(user, attrs.get("password")):
            raise AuthenticationFailed("invalid username or password")

        attrs["user"] = user
        return attrs


class UserDetailSerializer(serializers.Serializer):
    """Public user payload; ``posts`` holds post summaries or raw ids."""

    id = serializers.CharField(read_only=True)
    username = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    posts = serializers.ListField(read_only=True)


class LoginResponseSerializer(serializers.Serializer):
    token = serializers.CharField()
    username = serializers.CharField()
    name = serializers.CharField()


__all__ = [
    "LoginResponseSerializer",
    "LoginSerializer",
    "RegisterSerializer",
    "UserDetailSerializer",
]
