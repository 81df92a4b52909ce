"""クレデンシャル種別ごとの必須フィールド検証。

空文字（または None）かどうかのみを判定する。前後の空白除去やURL形式の検査は行わない。
"""

from __future__ import annotations

from typing import Sequence

from forcecreds.credentials.models import (
    CodeCredentials,
    PasswordCredentials,
    TokenCredentials,
)
from forcecreds.errors import ValidationError, create_validation_error

PASSWORD_REQUIRED_FIELDS = ("url", "username", "password", "client_id", "client_secret")
# access_token は任意
TOKEN_REQUIRED_FIELDS = ("url", "refresh_token", "client_id", "client_secret")
CODE_REQUIRED_FIELDS = ("url", "code", "redirect_uri", "client_id", "client_secret")


def _require(creds: object, variant: str, fields: Sequence[str]) -> None:
    for name in fields:
        # None も空として扱う。空白のみの値は許容する
        if not getattr(creds, name):
            raise ValidationError(create_validation_error(variant, name))


def validate_password_credentials(creds: PasswordCredentials) -> None:
    """パスワードクレデンシャルの必須フィールドを検証する。

    Raises:
        ValidationError: 最初に見つかった空のフィールドを示す。
    """
    _require(creds, "password", PASSWORD_REQUIRED_FIELDS)


def validate_token_credentials(creds: TokenCredentials) -> None:
    """トークンクレデンシャルの必須フィールドを検証する。

    Raises:
        ValidationError: 最初に見つかった空のフィールドを示す。
    """
    _require(creds, "token", TOKEN_REQUIRED_FIELDS)


def validate_code_credentials(creds: CodeCredentials) -> None:
    """認可コードクレデンシャルの必須フィールドを検証する。

    Raises:
        ValidationError: 最初に見つかった空のフィールドを示す。
    """
    _require(creds, "code", CODE_REQUIRED_FIELDS)
