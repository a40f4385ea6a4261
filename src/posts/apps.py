"""App configuration for shared posts."""

from django.apps import AppConfig


class PostsConfig(AppConfig):
    """Posts app holds the Post model, its store and the post service."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "posts"
