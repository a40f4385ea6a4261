"""URL patterns for user and login endpoints; the trailing slash is optional."""

from django.urls import re_path

from .views import LoginView, UserListView

urlpatterns = [
    re_path(r"^users/?$", UserListView.as_view(), name="user-list"),
    re_path(r"^login/?$", LoginView.as_view(), name="login"),
]
