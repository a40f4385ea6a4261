"""Tests for identifier validation and bearer token verification."""

from __future__ import annotations

import time
from types import SimpleNamespace

import jwt
from django.conf import settings
from django.test import RequestFactory, SimpleTestCase, override_settings
from rest_framework.exceptions import AuthenticationFailed

from authentication.services import Principal, TokenService
from core.authentication import BearerTokenAuthenticator, get_bearer_token
from core.identifiers import is_valid_identifier, new_identifier


class IdentifierTests(SimpleTestCase):
    def test_valid_identifiers(self):
        self.assertTrue(is_valid_identifier("5a422a851b54a676234d17f7"))
        self.assertTrue(is_valid_identifier("5A422A851B54A676234D17F7"))

    def test_invalid_identifiers(self):
        for value in ("", "5a422a851b54a676234d17f", "5a422a851b54a676234d17f7a", "g" * 24, None, 12, b"5a" * 12):
            with self.subTest(value=value):
                self.assertFalse(is_valid_identifier(value))

    def test_new_identifier_shape(self):
        ids = {new_identifier() for _ in range(50)}

        self.assertEqual(len(ids), 50)
        for value in ids:
            self.assertTrue(is_valid_identifier(value))
            self.assertEqual(value, value.lower())


class TokenServiceTests(SimpleTestCase):
    """Verification outcomes for issued, forged and malformed tokens."""

    user = SimpleNamespace(id="5a422a851b54a676234d17f7", username="mluukkai")

    def test_round_trip_yields_principal(self):
        token = TokenService.generate_token(self.user)

        principal = BearerTokenAuthenticator().authenticate(token)

        self.assertEqual(principal, Principal(user_id=self.user.id, username="mluukkai"))

    def test_missing_token_is_invalid(self):
        for token in (None, ""):
            with self.subTest(token=token):
                with self.assertRaisesMessage(AuthenticationFailed, "Invalid token"):
                    TokenService.verify(token)

    def test_token_signed_with_other_secret_rejected(self):
        token = jwt.encode({"id": self.user.id}, "another-secret", algorithm="HS256")

        with self.assertRaises(AuthenticationFailed):
            TokenService.verify(token)

    def test_expired_token_rejected(self):
        token = jwt.encode(
            {"id": self.user.id, "exp": int(time.time()) - 10},
            settings.SECRET_KEY,
            algorithm="HS256",
        )

        with self.assertRaisesMessage(AuthenticationFailed, "Token has expired"):
            TokenService.verify(token)

    def test_token_without_principal_claim_rejected(self):
        token = jwt.encode({"username": "mluukkai"}, settings.SECRET_KEY, algorithm="HS256")

        with self.assertRaises(AuthenticationFailed):
            TokenService.verify(token)

    @override_settings(TOKEN_TTL_SECONDS=120)
    def test_token_lifetime_follows_settings(self):
        claims = TokenService.decode_token(TokenService.generate_token(self.user))

        self.assertEqual(claims["exp"] - claims["iat"], 120)


class BearerExtractionTests(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def test_bearer_header(self):
        request = self.factory.get("/", HTTP_AUTHORIZATION="Bearer abc.def.ghi")
        self.assertEqual(get_bearer_token(request), "abc.def.ghi")

    def test_other_schemes_and_missing_header(self):
        self.assertIsNone(get_bearer_token(self.factory.get("/")))
        self.assertIsNone(get_bearer_token(self.factory.get("/", HTTP_AUTHORIZATION="Basic abc")))
        self.assertIsNone(get_bearer_token(self.factory.get("/", HTTP_AUTHORIZATION="Bearer ")))
