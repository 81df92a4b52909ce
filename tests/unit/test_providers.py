"""
グラント種別ごとのプロバイダのユニットテスト
"""

import dataclasses
import unittest
from urllib.parse import parse_qsl

from forcecreds.credentials.base import Provider
from forcecreds.credentials.models import (
    CodeCredentials,
    PasswordCredentials,
    TokenCredentials,
)
from forcecreds.credentials.providers import (
    AuthorizationCodeProvider,
    PasswordProvider,
    RefreshTokenProvider,
)
from forcecreds.errors import ValidationError


def decode_body(provider: Provider) -> dict:
    """ボディをデコードし、キーの重複が無いことを確認して辞書で返す"""
    pairs = parse_qsl(provider.retrieve().read().decode("ascii"), keep_blank_values=True)
    keys = [key for key, _ in pairs]
    assert len(keys) == len(set(keys)), f"duplicate keys: {keys}"
    return dict(pairs)


class TestPasswordProvider(unittest.TestCase):
    def setUp(self):
        self.creds = PasswordCredentials(
            url="https://login.salesforce.com",
            username="u",
            password="p",
            client_id="id",
            client_secret="sec",
        )

    def test_body(self):
        """ボディに5つのキーが正確に含まれること"""
        provider = PasswordProvider(self.creds)
        self.assertEqual(
            decode_body(provider),
            {
                "grant_type": "password",
                "username": "u",
                "password": "p",
                "client_id": "id",
                "client_secret": "sec",
            },
        )

    def test_url(self):
        self.assertEqual(PasswordProvider(self.creds).url(), "https://login.salesforce.com")

    def test_special_characters_are_encoded(self):
        """予約文字を含む値がエンコードされ、デコードで復元できること"""
        creds = dataclasses.replace(self.creds, username="user@example.com", password="p&ss=w rd+/?")
        provider = PasswordProvider(creds)
        raw = provider.retrieve().read().decode("ascii")
        self.assertNotIn("p&ss", raw)
        body = decode_body(provider)
        self.assertEqual(body["username"], "user@example.com")
        self.assertEqual(body["password"], "p&ss=w rd+/?")

    def test_invalid_credentials_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            PasswordProvider(dataclasses.replace(self.creds, password=""))
        self.assertEqual(ctx.exception.field, "password")

    def test_retrieve_returns_fresh_stream(self):
        """呼び出しごとに新しいストリームが返ること"""
        provider = PasswordProvider(self.creds)
        first = provider.retrieve()
        first.read()
        second = provider.retrieve()
        self.assertIsNot(first, second)
        self.assertTrue(second.read())

    def test_immutable(self):
        provider = PasswordProvider(self.creds)
        with self.assertRaises(AttributeError):
            provider._creds = dataclasses.replace(self.creds, username="other")
        with self.assertRaises(AttributeError):
            del provider._creds
        self.assertEqual(decode_body(provider)["username"], "u")


class TestRefreshTokenProvider(unittest.TestCase):
    def setUp(self):
        self.creds = TokenCredentials(
            url="https://test.salesforce.com",
            refresh_token="refresh",
            client_id="id",
            client_secret="sec",
        )

    def test_body_without_access_token(self):
        """access_tokenが空でも構築でき、ボディに含まれないこと"""
        provider = RefreshTokenProvider(self.creds)
        self.assertEqual(
            decode_body(provider),
            {
                "grant_type": "refresh_token",
                "client_id": "id",
                "client_secret": "sec",
                "refresh_token": "refresh",
            },
        )

    def test_access_token_never_encoded(self):
        provider = RefreshTokenProvider(dataclasses.replace(self.creds, access_token="at"))
        body = decode_body(provider)
        self.assertNotIn("access_token", body)
        self.assertNotIn("at", body.values())

    def test_url(self):
        self.assertEqual(RefreshTokenProvider(self.creds).url(), "https://test.salesforce.com")

    def test_missing_refresh_token(self):
        with self.assertRaises(ValidationError) as ctx:
            RefreshTokenProvider(dataclasses.replace(self.creds, refresh_token=""))
        self.assertEqual(ctx.exception.field, "refresh_token")


class TestAuthorizationCodeProvider(unittest.TestCase):
    def setUp(self):
        self.creds = CodeCredentials(
            url="https://login.salesforce.com",
            code="aPrx1",
            redirect_uri="https://app.example.com/oauth/callback",
            client_id="id",
            client_secret="sec",
        )

    def test_body(self):
        provider = AuthorizationCodeProvider(self.creds)
        self.assertEqual(
            decode_body(provider),
            {
                "grant_type": "authorization_code",
                "code": "aPrx1",
                "client_id": "id",
                "client_secret": "sec",
                "redirect_uri": "https://app.example.com/oauth/callback",
            },
        )

    def test_url(self):
        self.assertEqual(AuthorizationCodeProvider(self.creds).url(), "https://login.salesforce.com")

    def test_missing_redirect_uri(self):
        """従来と異なり、認可コード種別も構築時に検証されること"""
        with self.assertRaises(ValidationError) as ctx:
            AuthorizationCodeProvider(dataclasses.replace(self.creds, redirect_uri=""))
        self.assertEqual(ctx.exception.field, "redirect_uri")
        self.assertEqual(ctx.exception.variant, "code")


if __name__ == "__main__":
    unittest.main()
