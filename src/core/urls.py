"""Root URL configuration for the post sharing API."""
from django.urls import include, path, re_path
from drf_spectacular.views import SpectacularAPIView

from .views import unknown_endpoint

urlpatterns = [
    path("api/", include("authentication.urls")),
    path("api/", include("posts.urls")),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    # Must stay last: answers every unmatched path with the JSON envelope,
    # whether or not DEBUG is on.
    re_path(r"^", unknown_endpoint, name="unknown-endpoint"),
]

handler404 = "core.views.unknown_endpoint"
handler500 = "core.views.server_error"
