"""Tests for user registration, user listing and login."""

from __future__ import annotations

import logging
from io import StringIO

from django.core.management import call_command
from django.test import TestCase
from rest_framework.test import APIClient

from authentication.services import TokenService
from posts.models import Post
from tests.utils import SEED_POSTS, create_user


class UserApiTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.password = "salainen"
        cls.user = create_user("mluukkai", cls.password, name="Matti Luukkainen")

    def setUp(self):
        self.api_client = APIClient()

    def test_register_success(self):
        """Registration returns the public profile without the password."""
        response = self.api_client.post(
            "/api/users/", {"username": "hellas", "name": "Arto Hellas", "password": "sekret"}, format="json"
        )
        body = response.json()

        self.assertEqual(response.status_code, 201)
        self.assertEqual(body["errors"], [])
        self.assertEqual(body["data"]["username"], "hellas")
        self.assertEqual(body["data"]["posts"], [])
        self.assertNotIn("password", body["data"])
        self.assertNotIn("password_hash", body["data"])

    def test_register_duplicate_username_rejected(self):
        response = self.api_client.post(
            "/api/users/", {"username": "mluukkai", "name": "Copy", "password": "sekret"}, format="json"
        )
        body = response.json()

        self.assertEqual(response.status_code, 400)
        self.assertIsNone(body["data"])
        self.assertTrue(body["errors"])

    def test_register_short_username_or_password_rejected(self):
        for payload in (
            {"username": "ab", "password": "sekret"},
            {"username": "valid", "password": "ab"},
        ):
            with self.subTest(payload=payload):
                response = self.api_client.post("/api/users/", payload, format="json")
                self.assertEqual(response.status_code, 400)

    def test_login_returns_token(self):
        response = self.api_client.post(
            "/api/login/", {"username": "mluukkai", "password": self.password}, format="json"
        )
        body = response.json()

        self.assertEqual(response.status_code, 200)
        self.assertEqual(body["data"]["username"], "mluukkai")
        self.assertEqual(body["data"]["name"], "Matti Luukkainen")
        principal = TokenService.verify(body["data"]["token"])
        self.assertEqual(principal.user_id, self.user.pk)

    def test_login_wrong_password_is_unauthorized(self):
        response = self.api_client.post(
            "/api/login/", {"username": "mluukkai", "password": "wrong"}, format="json"
        )

        self.assertEqual(response.status_code, 401)
        self.assertIsNone(response.json()["data"])

    def test_login_inactive_user_is_unauthorized(self):
        self.user.is_active = False
        self.user.save(update_fields=["is_active"])

        response = self.api_client.post(
            "/api/login/", {"username": "mluukkai", "password": self.password}, format="json"
        )

        self.assertEqual(response.status_code, 401)

    def test_login_then_create_post(self):
        """A token from /api/login/ is accepted by the post endpoints."""
        token = self.api_client.post(
            "/api/login/", {"username": "mluukkai", "password": self.password}, format="json"
        ).json()["data"]["token"]
        self.api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

        with self.assertLogs("posts.services", level=logging.INFO):
            response = self.api_client.post(
                "/api/posts/", {"title": "a new title", "url": "www.afakeurl.com"}, format="json"
            )

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["data"]["owner"]["username"], "mluukkai")

    def test_user_list_expands_posts_and_skips_deleted(self):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {TokenService.generate_token(self.user)}")
        first = client.post("/api/posts/", {"title": "first", "url": "u1"}, format="json").json()["data"]
        second = client.post("/api/posts/", {"title": "second", "url": "u2", "likes": 3}, format="json").json()["data"]
        Post.objects.filter(pk=first["id"]).delete()

        body = self.api_client.get("/api/users/").json()

        listed = next(u for u in body["data"] if u["username"] == "mluukkai")
        self.assertEqual(
            listed["posts"],
            [{"id": second["id"], "title": "second", "author": None, "url": "u2", "likes": 3}],
        )
        self.user.refresh_from_db()
        self.assertEqual(self.user.posts, [first["id"], second["id"]])


class SeedCommandTests(TestCase):
    def test_seed_posts_command(self):
        call_command("seed_posts", stdout=StringIO())

        self.assertEqual(Post.objects.count(), len(SEED_POSTS))
        owner = Post.objects.select_related("owner").first().owner
        self.assertEqual(len(owner.posts), len(SEED_POSTS))

    def test_seed_posts_reset_is_repeatable(self):
        call_command("seed_posts", stdout=StringIO())
        call_command("seed_posts", "--reset", stdout=StringIO())

        self.assertEqual(Post.objects.count(), len(SEED_POSTS))

