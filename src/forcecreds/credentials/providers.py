"""グラント種別ごとのクレデンシャルプロバイダ。"""

from __future__ import annotations

import io
from typing import BinaryIO

import httpx

from forcecreds.credentials.base import Provider, _GrantType
from forcecreds.credentials.models import (
    CodeCredentials,
    PasswordCredentials,
    TokenCredentials,
)
from forcecreds.credentials.validators import (
    validate_code_credentials,
    validate_password_credentials,
    validate_token_credentials,
)


def _encode_form(form: dict[str, str]) -> BinaryIO:
    query = httpx.QueryParams(form)
    return io.BytesIO(str(query).encode("ascii"))


class _ImmutableProvider(Provider):
    __slots__ = ()

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} は変更できません")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} は変更できません")


class PasswordProvider(_ImmutableProvider):
    """パスワードクレデンシャルでリクエストボディを生成する。"""

    __slots__ = ("_creds",)

    def __init__(self, creds: PasswordCredentials) -> None:
        """PasswordProviderを初期化する。

        Args:
            creds: パスワードクレデンシャル。

        Raises:
            ValidationError: 必須フィールドが空の場合。
        """

        validate_password_credentials(creds)
        object.__setattr__(self, "_creds", creds)

    def retrieve(self) -> BinaryIO:
        return _encode_form(
            {
                "grant_type": _GrantType.PASSWORD.value,
                "username": self._creds.username,
                "password": self._creds.password,
                "client_id": self._creds.client_id,
                "client_secret": self._creds.client_secret,
            }
        )

    def url(self) -> str:
        return self._creds.url


class RefreshTokenProvider(_ImmutableProvider):
    """トークンクレデンシャルでリフレッシュ要求のボディを生成する。"""

    __slots__ = ("_creds",)

    def __init__(self, creds: TokenCredentials) -> None:
        """RefreshTokenProviderを初期化する。

        Args:
            creds: トークンクレデンシャル。access_token は使用しない。

        Raises:
            ValidationError: 必須フィールドが空の場合。
        """

        validate_token_credentials(creds)
        object.__setattr__(self, "_creds", creds)

    def retrieve(self) -> BinaryIO:
        return _encode_form(
            {
                "grant_type": _GrantType.REFRESH_TOKEN.value,
                "client_id": self._creds.client_id,
                "client_secret": self._creds.client_secret,
                "refresh_token": self._creds.refresh_token,
            }
        )

    def url(self) -> str:
        return self._creds.url


class AuthorizationCodeProvider(_ImmutableProvider):
    """認可コードクレデンシャルでコード交換要求のボディを生成する。"""

    __slots__ = ("_creds",)

    def __init__(self, creds: CodeCredentials) -> None:
        validate_code_credentials(creds)
        object.__setattr__(self, "_creds", creds)

    def retrieve(self) -> BinaryIO:
        return _encode_form(
            {
                "grant_type": _GrantType.AUTHORIZATION_CODE.value,
                "code": self._creds.code,
                "client_id": self._creds.client_id,
                "client_secret": self._creds.client_secret,
                "redirect_uri": self._creds.redirect_uri,
            }
        )

    def url(self) -> str:
        return self._creds.url
