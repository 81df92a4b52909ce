"""クレデンシャルプロバイダの公開API。"""

from __future__ import annotations

import dataclasses
from typing import TypeVar

from forcecreds.credentials.base import Provider
from forcecreds.credentials.facade import (
    Credentials,
    new_code_credentials,
    new_credentials,
    new_password_credentials,
    new_token_credentials,
)
from forcecreds.credentials.models import (
    CodeCredentials,
    PasswordCredentials,
    TokenCredentials,
    mask_secret,
)
from forcecreds.credentials.providers import (
    AuthorizationCodeProvider,
    PasswordProvider,
    RefreshTokenProvider,
)
from forcecreds.errors import ConfigurationError, ErrorCode, create_configuration_error

_CredentialsT = TypeVar("_CredentialsT", PasswordCredentials, TokenCredentials, CodeCredentials)

__all__ = [
    "AuthorizationCodeProvider",
    "CodeCredentials",
    "Credentials",
    "PasswordCredentials",
    "PasswordProvider",
    "Provider",
    "RefreshTokenProvider",
    "TokenCredentials",
    "get_credentials",
    "mask_secret",
    "new_code_credentials",
    "new_credentials",
    "new_password_credentials",
    "new_token_credentials",
]


def get_credentials(grant_type: str, **fields: str) -> Credentials:
    """グラント種別名からクレデンシャルを生成する。

    Args:
        grant_type: グラント種別（password / refresh_token / authorization_code）。
        **fields: 選択したクレデンシャル種別のフィールド値。

    Returns:
        検証済みのクレデンシャル。

    Raises:
        ConfigurationError: 未対応のグラント種別、または未知のフィールドが指定された場合。
        ValidationError: 必須フィールドが空の場合。
    """

    normalized = grant_type.lower() if isinstance(grant_type, str) else None
    if normalized == "password":
        return new_password_credentials(_build(PasswordCredentials, normalized, fields))
    if normalized in {"refresh_token", "refresh", "token"}:
        return new_token_credentials(_build(TokenCredentials, normalized, fields))
    if normalized in {"authorization_code", "code"}:
        return new_code_credentials(_build(CodeCredentials, normalized, fields))
    raise ConfigurationError(
        create_configuration_error(
            f"未対応のグラント種別です: {grant_type!r}",
            code=ErrorCode.CONFIG_INVALID_VALUE,
            details={"grant_type": grant_type},
        )
    )


def _build(cls: type[_CredentialsT], grant_type: str, fields: dict[str, str]) -> _CredentialsT:
    """未知のフィールドを拒否してから値オブジェクトを生成する。

    Raises:
        ConfigurationError: cls に存在しないフィールドが含まれる場合。
    """
    known = {f.name for f in dataclasses.fields(cls)}
    unknown = sorted(set(fields) - known)
    if unknown:
        raise ConfigurationError(
            create_configuration_error(
                f"{cls.__name__} に存在しないフィールドです: {', '.join(unknown)}",
                code=ErrorCode.CONFIG_INVALID_VALUE,
                details={"grant_type": grant_type, "unknown_fields": unknown},
            )
        )
    return cls(**fields)
